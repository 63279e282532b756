"""Tests for the reference data loader."""

import pytest

from app.models.politics import Politician
from app.models.reference import Office, OperatorAccount, Region
from app.repositories import (
    AccountRepository,
    PoliticianRepository,
    RankingRepository,
    RegionRepository,
    get_write_connection,
)
from etl import SeedError, seed_all, seed_politicians, seed_reference, validate_seed

OPERATOR = OperatorAccount(
    email="admin@example.com",
    password="s3cret-pass",
    first_name="Super",
    last_name="Admin",
)

REGIONS = [
    Region("LA", "Lagos", "South West"),
    Region("KN", "Kano", "North West"),
]

OFFICES = [
    Office("Governor", "GOVERNOR", "State", "State Chief Executive"),
    Office("Senator", "SENATOR", "Federal", "Member of the Senate"),
]

POLITICIANS = [
    Politician("Ada", "Obi", "APC", "Lagos", "GOVERNOR", "Bio", performance_score=60),
    Politician("Bala", "Musa", "PDP", "Kano", "GOVERNOR", "Bio", performance_score=75),
    Politician("Chidi", "Eze", "LP", "Lagos", "SENATOR", "Bio", performance_score=40),
    Politician("Dayo", "Ade", "APC", "Kano", "SENATOR", "Bio", performance_score=40),
]

# Columns that are stable across reruns (no timestamps)
SNAPSHOT = {
    "region": "SELECT code, name, zone FROM region ORDER BY code",
    "office": "SELECT name, id, category, level, description FROM office ORDER BY name",
    "account": "SELECT email, password_hash, first_name, last_name, role, is_active FROM account ORDER BY email",
    "politician": "SELECT * FROM politician ORDER BY id",
    "tenure": "SELECT * FROM tenure ORDER BY politician_id, office_id",
    "ranking": "SELECT politician_id, office_id, rank, total_score FROM ranking ORDER BY office_id, rank",
}


def snapshot(conn):
    return {table: conn.execute(query).fetchall() for table, query in SNAPSHOT.items()}


@pytest.fixture
def conn(tmp_path):
    conn = get_write_connection(str(tmp_path / "seed.duckdb"))
    yield conn
    conn.close()


def seed(conn, regions=REGIONS, politicians=POLITICIANS):
    report = seed_reference(conn, OPERATOR, regions=regions, offices=OFFICES)
    return seed_politicians(conn, politicians=politicians, report=report)


class TestSeedReference:
    def test_counts(self, conn):
        report = seed_reference(conn, OPERATOR, regions=REGIONS, offices=OFFICES)
        assert (report.regions, report.offices, report.operators) == (2, 2, 1)
        assert conn.execute("SELECT COUNT(*) FROM region").fetchone()[0] == 2

    def test_duplicate_region_last_write_wins(self, conn):
        regions = [Region("LA", "Lagos", "South West"), Region("LA", "Lagos State", "SW")]
        seed_reference(conn, OPERATOR, regions=regions, offices=OFFICES)
        assert conn.execute("SELECT COUNT(*) FROM region").fetchone()[0] == 1
        assert RegionRepository(conn=conn).get("LA") == Region("LA", "Lagos State", "SW")

    def test_operator_password_kept_on_rerun(self, conn):
        seed_reference(conn, OPERATOR, regions=REGIONS, offices=OFFICES)
        first = conn.execute("SELECT password_hash FROM account").fetchone()[0]

        renamed = OperatorAccount(OPERATOR.email, "another-pass", "Chief", "Admin")
        seed_reference(conn, renamed, regions=REGIONS, offices=OFFICES)

        assert conn.execute("SELECT password_hash FROM account").fetchone()[0] == first
        accounts = AccountRepository(conn=conn)
        assert accounts.get(OPERATOR.email)["first_name"] == "Chief"
        assert accounts.check_password(OPERATOR.email, OPERATOR.password)
        assert not accounts.check_password(OPERATOR.email, "another-pass")

    def test_password_not_stored_in_clear(self, conn):
        seed_reference(conn, OPERATOR, regions=REGIONS, offices=OFFICES)
        stored = conn.execute("SELECT password_hash FROM account").fetchone()[0]
        assert OPERATOR.password not in stored


class TestSeedPoliticians:
    def test_counts(self, conn):
        report = seed(conn)
        assert report.politicians == 4
        assert report.tenures_created == 4
        assert report.rankings == 4

    def test_idempotent(self, conn):
        seed(conn)
        first = snapshot(conn)
        report = seed(conn)
        assert snapshot(conn) == first
        assert report.tenures_created == 0

    def test_office_change_closes_previous_tenure(self, conn):
        seed(conn)
        moved = Politician("Ada", "Obi", "APC", "Lagos", "SENATOR", "Bio", performance_score=60)
        report = seed(conn, politicians=[moved, *POLITICIANS[1:]])
        assert report.tenures_created == 1

        current = conn.execute(
            "SELECT office_id FROM tenure WHERE politician_id = 'ada-obi' AND is_current"
        ).fetchall()
        assert current == [("senator",)]
        ranked = conn.execute("SELECT office_id FROM ranking WHERE politician_id = 'ada-obi'").fetchall()
        assert ranked == [("senator",)]
        governors = RankingRepository(conn=conn).get_by_office("governor")
        assert [r.politician_id for r in governors] == ["bala-musa"]

    def test_listing_shows_current_office_of_active_politicians(self, conn):
        seed(conn)
        conn.execute("UPDATE politician SET is_active = FALSE WHERE id = 'dayo-ade'")
        listed = PoliticianRepository(conn=conn).get_all()
        assert [p["id"] for p in listed] == ["bala-musa", "ada-obi", "chidi-eze"]
        assert listed[1]["office"] == "Governor"
        assert listed[1]["state"] == "Lagos"

    def test_rankings_dense_per_office(self, conn):
        seed(conn)
        ranks = conn.execute(
            "SELECT office_id, LIST(rank ORDER BY rank) FROM ranking GROUP BY office_id ORDER BY office_id"
        ).fetchall()
        assert ranks == [("governor", [1, 2]), ("senator", [1, 2])]

    def test_ranking_order(self, conn):
        seed(conn)
        governors = RankingRepository(conn=conn).get_by_office("governor")
        assert [r.name for r in governors] == ["Bala Musa", "Ada Obi"]
        assert governors[0].region == "Kano"

    def test_tie_broken_by_id(self, conn):
        seed(conn)
        senators = RankingRepository(conn=conn).get_by_office("senator")
        assert [r.politician_id for r in senators] == ["chidi-eze", "dayo-ade"]

    def test_unknown_region_raises(self, conn):
        stray = Politician("Eko", "Ilu", "APC", "Atlantis", "GOVERNOR", "Bio")
        with pytest.raises(SeedError) as exc:
            seed(conn, politicians=[stray])
        assert exc.value.kind == "politician"
        assert exc.value.key == "eko-ilu"
        assert "Atlantis" in exc.value.message

    def test_failure_stops_at_first_error(self, conn):
        stray = Politician("Eko", "Ilu", "APC", "Atlantis", "GOVERNOR", "Bio")
        with pytest.raises(SeedError):
            seed(conn, politicians=[POLITICIANS[0], stray, POLITICIANS[1]])
        ids = [r[0] for r in conn.execute("SELECT id FROM politician ORDER BY id").fetchall()]
        assert ids == ["ada-obi"]


class TestSeedAll:
    def test_full_reference_data_validates(self, conn):
        report = seed_all(conn, OPERATOR)
        assert report.regions == 37
        assert report.politicians > 0

        result = validate_seed(conn)
        assert result["valid"], result["issues"]
        assert result["stats"]["ranking"] == report.rankings

    def test_reference_only(self, conn):
        report = seed_all(conn, OPERATOR, with_politicians=False)
        assert report.politicians == 0
        assert validate_seed(conn)["stats"]["politician"] == 0


class TestValidateSeed:
    def test_empty_database(self, conn):
        result = validate_seed(conn)
        assert not result["valid"]
        assert "No regions found" in result["issues"]
        assert "No active operator account" in result["issues"]

    def test_detects_rank_gap(self, conn):
        seed(conn)
        conn.execute("UPDATE ranking SET rank = 5 WHERE politician_id = 'ada-obi'")
        result = validate_seed(conn)
        assert not result["valid"]
        assert any("governor" in issue for issue in result["issues"])
