"""
Orchestra CMS - CLI Command Tests
"""

from orchestra_cms.models.user import User


def run_create_admin(app, *args):
    return app.test_cli_runner().invoke(args=["create-admin", *args])


class TestCreateAdmin:
    def test_creates_admin(self, app):
        result = run_create_admin(
            app, "--email", "Root@Orchestra.test", "--full-name", "Root", "--password", "Adm1n!Passw0rd"
        )

        assert result.exit_code == 0
        assert "Created admin root@orchestra.test" in result.output
        with app.app_context():
            user = User.query.filter_by(email="root@orchestra.test").one()
            assert user.role == "admin"
            assert user.check_password("Adm1n!Passw0rd")

    def test_rejects_weak_password(self, app):
        result = run_create_admin(app, "--email", "root@orchestra.test", "--full-name", "Root", "--password", "weak")

        assert result.exit_code == 1
        with app.app_context():
            assert User.query.filter_by(email="root@orchestra.test").count() == 0

    def test_rejects_existing_email(self, app, users):
        result = run_create_admin(
            app, "--email", "admin@orchestra.test", "--full-name", "Dup", "--password", "Adm1n!Passw0rd"
        )

        assert result.exit_code == 1
