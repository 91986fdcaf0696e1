import rsearch
from rsearch.foundation.version import get_version


def test_version_is_a_string():
    assert isinstance(get_version(), str)
    assert rsearch.__version__ == get_version()


def test_public_api_exports_resolve():
    for name in rsearch.__all__:
        assert getattr(rsearch, name) is not None
