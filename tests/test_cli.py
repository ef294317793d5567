"""Flask CLI commands."""

from mavera_hall.models import Booking, HallProfile


def test_init_db(app):
    result = app.test_cli_runner().invoke(args=["init-db"])
    assert "Database ready." in result.output
    assert HallProfile.query.count() == 1


def test_seed_is_idempotent(app):
    runner = app.test_cli_runner()

    first = runner.invoke(args=["seed"])
    assert first.exit_code == 0
    # structured log lines go to stderr, stdout only carries the summary
    lines = first.output.splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("Seeded ")
    count = Booking.query.count()

    second = runner.invoke(args=["seed"])
    assert "already has bookings" in second.output
    assert Booking.query.count() == count

    runner.invoke(args=["seed", "--reset"])
    assert Booking.query.count() == count
