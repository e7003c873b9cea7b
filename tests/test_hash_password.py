from fleet_admin.hash_password import main
from fleet_admin.utils.security import PasswordVerifier


def test_prints_usable_hash(capsys) -> None:
    assert main(["correct horse"]) == 0
    hashed = capsys.readouterr().out.strip()

    assert hashed.startswith("$2b$")
    assert PasswordVerifier(hashed=hashed).verify("correct horse") is True


def test_rejects_empty_password(capsys) -> None:
    assert main([""]) == 1
    assert "empty" in capsys.readouterr().err
