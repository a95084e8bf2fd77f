from mentors_api.auth import passwords


def test_hash_password_uses_work_factor_ten() -> None:
    password_hash = passwords.hash_password('pw')

    assert password_hash.startswith('$2b$10$')
    assert password_hash != 'pw'


def test_hash_password_salts_each_hash() -> None:
    assert passwords.hash_password('pw', rounds=4) != passwords.hash_password('pw', rounds=4)


def test_verify_password_accepts_matching_password() -> None:
    password_hash = passwords.hash_password('correct horse', rounds=4)

    assert passwords.verify_password('correct horse', password_hash) is True
    assert passwords.verify_password('wrong horse', password_hash) is False


def test_verify_password_rejects_missing_or_malformed_hash() -> None:
    assert passwords.verify_password('pw', None) is False
    assert passwords.verify_password('pw', '') is False
    assert passwords.verify_password('pw', 'not-a-bcrypt-hash') is False
