"""Unit tests: main entry point exit codes and output, with DB collaborators patched."""
import subprocess
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

import main
from db import masked_database_url
from schemas.cities import CityResponse, CityWithDistance

pytestmark = pytest.mark.unit


def _nearby():
    return [
        CityWithDistance(city=CityResponse(id=2, name="Bath", longitude=-2.359, latitude=51.3758), distance_metres=155_000.0),
        CityWithDistance(city=CityResponse(id=1, name="Bristol", longitude=-2.5879, latitude=51.4545), distance_metres=170_250.0),
    ]


def test_main_prints_results(capsys):
    """Successful run prints one line per city in result order and exits 0."""
    with patch("main.run_migrations"), patch("main.seed_and_search", return_value=_nearby()):
        assert main.main() == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "City ID: 2, Name: Bath, Distance: 155.00 KM",
        "City ID: 1, Name: Bristol, Distance: 170.25 KM",
    ]


def test_main_migration_failure_exits_1(capsys):
    """Alembic failure is fatal: exit 1, nothing printed."""
    with patch("main.run_migrations", side_effect=RuntimeError("Alembic upgrade failed: boom")), \
            patch("main.seed_and_search") as search:
        assert main.main() == 1
    search.assert_not_called()
    assert capsys.readouterr().out == ""


def test_main_database_error_exits_1(capsys):
    """Unreachable database during seed/query is fatal: exit 1."""
    error = OperationalError("SELECT 1", {}, Exception("connection refused"))
    with patch("main.run_migrations"), patch("main.seed_and_search", side_effect=error):
        assert main.main() == 1
    assert capsys.readouterr().out == ""


def test_run_migrations_raises_on_failure():
    """Non-zero alembic exit raises RuntimeError carrying stderr."""
    failed = subprocess.CompletedProcess(args=[], returncode=1, stdout="", stderr="extension postgis not available")
    with patch("main.subprocess.run", return_value=failed):
        with pytest.raises(RuntimeError, match="extension postgis not available"):
            main.run_migrations()


def test_run_migrations_invokes_alembic_upgrade_head():
    ok = subprocess.CompletedProcess(args=[], returncode=0, stdout="", stderr="")
    with patch("main.subprocess.run", return_value=ok) as run:
        main.run_migrations()
    cmd = run.call_args.args[0]
    assert cmd[-3:] == ["alembic", "upgrade", "head"]


def test_search_parameters():
    """Demo searches 600 km around London."""
    assert main.SEARCH_RADIUS_M == 600_000.0
    assert (main.LONDON.longitude, main.LONDON.latitude) == (-0.1276, 51.5074)


def test_masked_database_url_hides_password():
    """Password never appears in the logged URL."""
    masked = masked_database_url()
    assert "secret" not in masked
    assert "test" in masked
