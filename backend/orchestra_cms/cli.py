import click
from pydantic import ValidationError

from orchestra_cms.extensions import db
from orchestra_cms.models.user import User
from orchestra_cms.schemas.common import format_errors
from orchestra_cms.schemas.users import CreateUser


def register_commands(app):
    @app.cli.command("create-admin")
    @click.option("--email", prompt=True)
    @click.option("--full-name", prompt=True)
    @click.password_option()
    def create_admin(email, full_name, password):
        """Create the first admin account. Accounts are never self-registered."""
        try:
            data = CreateUser(email=email, fullName=full_name, role="admin", password=password)
        except ValidationError as e:
            for error in format_errors(e):
                click.echo(f"{error['loc']}: {error['msg']}", err=True)
            raise SystemExit(1)

        if User.query.filter_by(email=data.email).first():
            click.echo(f"User {data.email} already exists", err=True)
            raise SystemExit(1)

        user = User()
        user.email = data.email
        user.full_name = data.fullName
        user.role = "admin"
        user.set_password(data.password)

        db.session.add(user)
        db.session.commit()
        click.echo(f"Created admin {user.email} (id {user.id})")
