"""Android layout XML fragments written into each generated page.

The fragment text is consumed verbatim by the app, including the ids and the
placeholder label text, so it must not be reformatted.
"""

LABEL_PLACEHOLDER = "80"

_HEADER = """<?xml version="1.0" encoding="utf-8"?>
<android.support.constraint.ConstraintLayout
    xmlns:android="http://schemas.android.com/apk/res/android"
    xmlns:app="http://schemas.android.com/apk/res-auto"
    android:layout_width="match_parent"
    android:background="#424242"
    android:layout_height="match_parent" >

    <ScrollView
        android:layout_width="match_parent"
        android:layout_height="match_parent" >

        <LinearLayout
            android:layout_width="match_parent"
            android:layout_height="wrap_content"
            android:orientation="vertical" > """

_FOOTER = """        </LinearLayout>
    </ScrollView>

</android.support.constraint.ConstraintLayout>"""

_ROW_OPEN = """            <LinearLayout
                android:id="@+id/linearLayoutSkins{page_id}_{layout_id}"
                android:layout_width="match_parent"
                android:layout_height="wrap_content"
                android:layout_marginStart="8dp"
                android:layout_marginLeft="8dp"
                android:layout_marginTop="8dp"
                android:layout_marginEnd="8dp"
                android:layout_marginRight="8dp"
                android:gravity="center"
                android:orientation="horizontal"
                android:padding="8dp" > """

_ROW_CLOSE = "            </LinearLayout>"

_IMAGE_BUTTON = """                <ImageButton
                    android:id="@+id/{name}_Button"
                    android:layout_width="50dp"
                    android:layout_height="50dp"
                    android:layout_weight="1"
                    android:background="#424242"
                    android:onClick="onClickSkin"
                    android:scaleType="fitCenter"
                    android:src="@drawable/{name}" />"""

_TEXT_LABEL = """                <TextView
                    android:id="@+id/{name}_Label"
                    android:layout_width="0dp"
                    android:layout_height="wrap_content"
                    android:layout_weight="1"
                    android:onClick="onClickSkin"
                    android:text="{text}"
                    android:textAlignment="center" /> """


def header() -> str:
    return _HEADER


def footer() -> str:
    return _FOOTER


def row_open(page_id: int, layout_id: int) -> str:
    """Opening tag of a horizontal row container."""
    return _ROW_OPEN.format(page_id=page_id, layout_id=layout_id)


def row_close() -> str:
    return _ROW_CLOSE


def image_button(name: str) -> str:
    """Button showing drawable ``name``, identified as ``<name>_Button``."""
    return _IMAGE_BUTTON.format(name=name)


def text_label(name: str) -> str:
    """Label under the button for ``name``; always shows the placeholder text."""
    return _TEXT_LABEL.format(name=name, text=LABEL_PLACEHOLDER)
