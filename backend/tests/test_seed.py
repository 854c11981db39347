from ecotrack.config import settings
from ecotrack.models import Role, SystemSettings, User
from ecotrack.schemas import UserUpdate
from ecotrack.seed import seed_defaults
from ecotrack.services.auth import UserService


def test_seed_creates_settings_and_manager(db):
    seed_defaults(db)

    row = db.query(SystemSettings).one()
    assert row.units == list(settings.default_units)
    assert row.water_goal == settings.default_water_goal

    admin = db.query(User).one()
    assert admin.role == Role.MANAGER
    assert admin.email == settings.admin_email.lower()
    assert UserService(db).find_user_by_credentials(settings.admin_email, settings.admin_password) is not None


def test_seed_is_idempotent(db):
    seed_defaults(db)
    db.query(SystemSettings).one().units = ["Changed"]
    db.commit()

    seed_defaults(db)

    assert db.query(SystemSettings).one().units == ["Changed"]
    assert db.query(User).count() == 1


def test_seed_promotes_demoted_admin(db):
    seed_defaults(db)
    service = UserService(db)
    admin = db.query(User).one()
    service.update_user(admin.id, UserUpdate(role=Role.VIEWER))

    seed_defaults(db)

    assert db.query(User).count() == 1
    assert service.get_user(admin.id).role == Role.MANAGER
