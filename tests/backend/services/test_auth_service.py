import pytest
from sqlalchemy.exc import IntegrityError

from backend.core.errors import AuthError, ConflictError, ValidationError
from backend.models.admin import Admin
from backend.models.user import User
from backend.schemas.auth import AdminLoginRequest, LoginRequest, RegisterRequest
from backend.services.auth_service import AuthService


def _registration(**overrides) -> RegisterRequest:
    fields = {
        'fullName': 'Ana Cruz',
        'studentId': 'S-001',
        'email': 'ana@example.com',
        'phone': '09170000000',
        'password': 'secret123',
    }
    fields.update(overrides)
    return RegisterRequest(**fields)


@pytest.fixture
def service(db, hasher, tokens) -> AuthService:
    return AuthService(db, hasher, tokens)


def test_register_stores_hashed_password_and_default_role(service, db, hasher) -> None:
    user = service.register(_registration())

    stored = db.query(User).filter(User.id == user.id).one()
    assert stored.role == 'student'
    assert stored.password != 'secret123'
    assert hasher.verify('secret123', stored.password)
    assert stored.created_at is not None


@pytest.mark.parametrize('missing', ['fullName', 'studentId', 'email', 'phone', 'password'])
def test_register_requires_every_field(service, db, missing: str) -> None:
    with pytest.raises(ValidationError) as exception_info:
        service.register(_registration(**{missing: None}))

    assert exception_info.value.message == 'All fields are required'
    assert exception_info.value.status_code == 400
    assert db.query(User).count() == 0


def test_register_treats_blank_field_as_missing(service) -> None:
    with pytest.raises(ValidationError):
        service.register(_registration(fullName='   '))


@pytest.mark.parametrize(
    'duplicate',
    [
        {'studentId': 'S-001', 'email': 'other@example.com'},
        {'studentId': 'S-999', 'email': 'ana@example.com'},
    ],
)
def test_register_rejects_duplicate_student_id_or_email(service, db, duplicate: dict) -> None:
    service.register(_registration())

    with pytest.raises(ConflictError) as exception_info:
        service.register(_registration(**duplicate))

    assert exception_info.value.message == 'User already exists'
    assert exception_info.value.status_code == 400
    assert db.query(User).count() == 1


def test_register_maps_unique_violation_from_store_to_conflict(service, db, monkeypatch) -> None:
    def fail_commit():
        raise IntegrityError('INSERT INTO users', {}, Exception('UNIQUE constraint failed: users.email'))

    monkeypatch.setattr(db, 'commit', fail_commit)

    with pytest.raises(ConflictError):
        service.register(_registration())


def test_login_accepts_student_id_or_email(service, tokens) -> None:
    registered = service.register(_registration())

    for identifier in ('S-001', 'ana@example.com'):
        token, user = service.login(LoginRequest(userIdOrEmail=identifier, password='secret123'))
        claims = tokens.verify(token)

        assert user.id == registered.id
        assert claims['id'] == registered.id
        assert claims['studentId'] == 'S-001'
        assert claims['role'] == 'student'


def test_login_failures_are_indistinguishable(service) -> None:
    service.register(_registration())

    with pytest.raises(AuthError) as wrong_password:
        service.login(LoginRequest(userIdOrEmail='S-001', password='nope'))
    with pytest.raises(AuthError) as unknown_user:
        service.login(LoginRequest(userIdOrEmail='S-404', password='secret123'))

    assert wrong_password.value.message == unknown_user.value.message == 'Invalid credentials'
    assert wrong_password.value.status_code == unknown_user.value.status_code == 401


def test_login_with_missing_fields_is_an_auth_failure(service) -> None:
    with pytest.raises(AuthError):
        service.login(LoginRequest())


def test_admin_login_issues_admin_token(service, db, hasher, tokens) -> None:
    db.add(Admin(username='admin', password=hasher.hash('admin123')))
    db.commit()

    token, admin = service.admin_login(AdminLoginRequest(username='admin', password='admin123'))

    claims = tokens.verify(token)
    assert admin.username == 'admin'
    assert claims['username'] == 'admin'
    assert claims['role'] == 'admin'
    assert claims['id'] == admin.id


def test_admin_login_failures_are_indistinguishable(service, db, hasher) -> None:
    db.add(Admin(username='admin', password=hasher.hash('admin123')))
    db.commit()

    with pytest.raises(AuthError) as wrong_password:
        service.admin_login(AdminLoginRequest(username='admin', password='wrong'))
    with pytest.raises(AuthError) as unknown_admin:
        service.admin_login(AdminLoginRequest(username='root', password='admin123'))

    assert wrong_password.value.message == unknown_admin.value.message == 'Invalid admin credentials'


def test_admin_login_username_match_is_exact(service, db, hasher) -> None:
    db.add(Admin(username='admin', password=hasher.hash('admin123')))
    db.commit()

    with pytest.raises(AuthError):
        service.admin_login(AdminLoginRequest(username='ADMIN', password='admin123'))


def test_register_accepts_whitespace_password_verbatim(service, hasher) -> None:
    user = service.register(_registration(password='   '))

    assert hasher.verify('   ', user.password)


def test_register_rejects_empty_password(service) -> None:
    with pytest.raises(ValidationError):
        service.register(_registration(password=''))
