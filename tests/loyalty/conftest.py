import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def loyalty_bed():
    from loyalty.domain import loyalty

    bed = DomainFixture(loyalty)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(loyalty_bed):
    """Push the domain context for each test and clear stored data after."""
    with loyalty_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()

        current_domain.event_store.store._data_reset()


@pytest.fixture(autouse=True)
def email_channel(monkeypatch):
    """Route tier notifications to a recording email adapter."""
    from loyalty.notification.channel import get_channel, reset_channel

    monkeypatch.setenv("LOYALTY_EMAIL_ADAPTER", "fake")
    reset_channel()
    yield get_channel()
    reset_channel()
