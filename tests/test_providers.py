from app.core.providers import StaticIdentityProvider, SystemClock, UuidGenerator


def test_system_clock_never_goes_backwards(monkeypatch):
    readings = iter([1_000, 900, 1_100])
    monkeypatch.setattr("app.core.providers.time.time_ns", lambda: next(readings))
    clock = SystemClock()

    assert [clock.now(), clock.now(), clock.now()] == [1_000, 1_000, 1_100]


def test_uuid_generator_returns_fresh_ids():
    ids = UuidGenerator()

    generated = {ids.new_id() for _ in range(100)}

    assert len(generated) == 100


def test_static_identity_provider():
    assert StaticIdentityProvider("alice-principal").current_principal() == "alice-principal"
