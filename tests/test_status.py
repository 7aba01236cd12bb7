from skin_layout_generator.status import StatusReporter, format_status


def test_format_status_joins_and_trims():
    assert format_status("Wrote", " fragment_skin_shop_1.xml ") == (
        "Wrote fragment_skin_shop_1.xml"
    )
    assert format_status("", "detail") == "detail"
    assert format_status("action", "") == "action"


def test_reporter_prints_when_not_a_tty(capsys):
    with StatusReporter(total=2) as reporter:
        reporter.log_status("Processing folder", "Hats (3 assets)")
        reporter.advance()

    assert "Processing folder Hats (3 assets)" in capsys.readouterr().out


def test_quiet_reporter_is_silent(capsys):
    with StatusReporter(total=1, quiet=True) as reporter:
        reporter.log_status("Wrote", "fragment_skin_shop_1.xml")
        reporter.advance()

    assert capsys.readouterr().out == ""


def test_close_releases_bar():
    reporter = StatusReporter(total=3, disable=True)
    reporter.set_total(5)
    assert reporter.total == 5
    reporter.close()
    reporter.advance()
    reporter.close()
