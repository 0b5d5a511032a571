from tracking.manage import main, run
from tracking.models.user import UserRole
from tracking.repositories.users import UserRepository


def test_promote_and_demote(db, session_factory):
    users = UserRepository(db)
    alice = users.create("alice", "alice@example.com", "hash")

    assert run("promote", "alice", session_factory) == 0
    db.expire_all()
    assert users.get_active(alice.id).role is UserRole.ADMINISTRATOR

    assert run("demote", "alice", session_factory) == 0
    db.expire_all()
    assert users.get_active(alice.id).role is UserRole.SALES_EXECUTIVE


def test_deactivate(db, session_factory):
    users = UserRepository(db)
    alice = users.create("alice", "alice@example.com", "hash")

    assert run("deactivate", "alice", session_factory) == 0
    db.expire_all()
    assert users.get_active(alice.id) is None


def test_unknown_user(session_factory, capsys):
    assert run("promote", "ghost", session_factory) == 1
    assert "not found" in capsys.readouterr().out


def test_main_uses_configured_database(tmp_path, monkeypatch, capsys):
    from tracking.config import get_settings

    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'cli.db'}")
    get_settings.cache_clear()
    try:
        assert main(["promote", "nobody"]) == 1
    finally:
        get_settings.cache_clear()
    assert "Active user not found: nobody" in capsys.readouterr().out
