from core.paths import CONTENT_URI_PREFIX, DIRECTORY_URI_PREFIX, METADATA_URI_PREFIX
from resources.file_resources import FILE_RESOURCES, resource_templates


def test_file_resources_cover_each_prefix():
    assert {spec.prefix for spec in FILE_RESOURCES} == {
        METADATA_URI_PREFIX,
        CONTENT_URI_PREFIX,
        DIRECTORY_URI_PREFIX,
    }


def test_resource_templates():
    templates = {t.name: t for t in resource_templates()}

    assert templates["file_metadata"].uriTemplate == "file://metadata/{path}"
    assert templates["file_metadata"].mimeType == "application/json"
    assert templates["directory_listing"].uriTemplate == "file://directory/{path}"
    # Content media type varies per file
    assert templates["file_content"].mimeType is None
