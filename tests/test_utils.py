from pathlib import Path

from skin_layout_generator.utils import ASSUME_YES_ENV, confirm_layout_removal

STALE = [
    Path("XMLOutput/fragment_skin_shop_2.xml"),
    Path("XMLOutput/fragment_skin_shop_10.xml"),
]


def test_confirm_lists_every_file_before_asking(monkeypatch, capsys):
    monkeypatch.delenv(ASSUME_YES_ENV, raising=False)
    seen = []

    def fake_input(prompt):
        seen.append(capsys.readouterr().out)
        return "y"

    monkeypatch.setattr("builtins.input", fake_input)

    assert confirm_layout_removal(STALE, "XMLOutput") is True
    listed = seen[0]
    assert "Generated layouts already in XMLOutput:" in listed
    assert "  fragment_skin_shop_2.xml" in listed
    assert "  fragment_skin_shop_10.xml" in listed


def test_confirm_uses_default_on_enter(monkeypatch):
    monkeypatch.delenv(ASSUME_YES_ENV, raising=False)
    monkeypatch.setattr("builtins.input", lambda _: "")
    assert confirm_layout_removal(STALE, "out") is True
    assert confirm_layout_removal(STALE, "out", default=False) is False


def test_confirm_reasks_until_answered(monkeypatch, capsys):
    monkeypatch.delenv(ASSUME_YES_ENV, raising=False)
    inputs = iter(["maybe", "no"])
    monkeypatch.setattr("builtins.input", lambda _: next(inputs))

    assert confirm_layout_removal(STALE, "out") is False
    assert "Please enter 'y' or 'n'." in capsys.readouterr().out


def test_confirm_nothing_stale_does_not_prompt(monkeypatch, capsys):
    def fail(_):  # pragma: no cover - should not be called
        raise AssertionError("input should not be requested")

    monkeypatch.setattr("builtins.input", fail)
    assert confirm_layout_removal([], "out") is False
    assert capsys.readouterr().out == ""


def test_confirm_autoconfirm_still_lists_files(monkeypatch, capsys):
    monkeypatch.setenv(ASSUME_YES_ENV, "true")

    def fail(_):  # pragma: no cover - should not be called
        raise AssertionError("input should not be requested")

    monkeypatch.setattr("builtins.input", fail)
    assert confirm_layout_removal(STALE, "out") is True
    out = capsys.readouterr().out
    assert "fragment_skin_shop_10.xml" in out
    assert "(auto)" in out
