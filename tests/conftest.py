import pytest

from qanotify.identity.table import Identity, IdentityTable


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    from qanotify.core.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def identities() -> IdentityTable:
    """One coordinator (Jones) and two authors (Smith, O'Brien)."""
    return IdentityTable.from_identities([
        Identity("Jones,A", "a.jones@example.org", is_coordinator=True),
        Identity("Smith,B", "b.smith@example.org"),
        Identity("OBrien,J", "j.obrien@example.org"),
    ])
