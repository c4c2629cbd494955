import pytest

from core.mime import DEFAULT_TEXT_MEDIA_TYPE, media_type_for


@pytest.mark.parametrize(
    "path, expected",
    [
        ("notes.txt", "text/plain"),
        ("index.HTML", "text/html"),
        ("page.htm", "text/html"),
        ("site.css", "text/css"),
        ("app.js", "application/javascript"),
        ("data.json", "application/json"),
        ("feed.xml", "application/xml"),
        ("README.md", "text/markdown"),
        ("table.csv", "text/csv"),
        ("Main.java", "text/x-java-source"),
        ("script.py", "text/x-python"),
        ("main.c", "text/x-c"),
        ("main.cpp", "text/x-c"),
        ("main.h", "text/x-c"),
    ],
)
def test_media_type_for_known_extensions(path, expected):
    assert media_type_for(path) == expected


def test_media_type_for_unknown_defaults_to_text_plain():
    assert media_type_for("Makefile") == DEFAULT_TEXT_MEDIA_TYPE
    assert media_type_for("archive.tar.gz") == DEFAULT_TEXT_MEDIA_TYPE
    assert media_type_for("") == DEFAULT_TEXT_MEDIA_TYPE
