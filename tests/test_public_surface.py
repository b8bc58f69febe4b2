"""Public surface tests: what the package root exports."""

import searchschemer


def test_all_exports_resolve():
    for name in searchschemer.__all__:
        assert hasattr(searchschemer, name), name


def test_version_string():
    assert isinstance(searchschemer.__version__, str)
    assert searchschemer.__version__ in ("1.0.0", "dev")


def test_error_hierarchy():
    """All read errors are ValueErrors so callers can catch them together."""
    assert issubclass(searchschemer.MappingReadError, ValueError)
    assert issubclass(searchschemer.MalformedMappingError, searchschemer.MappingReadError)
    assert issubclass(searchschemer.MissingPropertiesError, searchschemer.MalformedMappingError)
    assert issubclass(searchschemer.MappingValueError, searchschemer.MappingReadError)


def test_mapping_names_are_strings():
    assert searchschemer.MappingName.MULTI_FIELD == "multi_field"
    assert searchschemer.MappingName.OMIT_FREQ_AND_POSITIONS == "omit_freq_and_positions"
