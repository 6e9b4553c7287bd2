""""""
import click
from flask import Flask
from flask.cli import with_appcontext

from studentquiz.core.extensions import db
from studentquiz.core.models.subjects import User


@click.command()
@with_appcontext
def initdb():
    """Create the application DB tables."""
    db.create_all()
    click.echo("Database initialized.")


@click.command()
@with_appcontext
def dropdb():
    """Drop the application DB."""
    if not click.confirm("Are you sure you want to drop the database?"):
        return
    click.echo(f"Dropping DB using engine: {db.engine.url!r}")
    db.drop_all()


@click.command()
@click.argument("username")
@click.argument("email")
@click.option("--admin", is_flag=True, default=False)
@click.option("--first_name", default="")
@click.option("--last_name", default="")
@with_appcontext
def createuser(username, email, admin=False, first_name="", last_name=""):
    """Create new user."""
    query = User.query.filter((User.email == email) | (User.username == username))
    if query.count() > 0:
        click.echo(f"A user with username '{username}' or email '{email}' already exists, aborting.")
        return

    user = User(
        username=username,
        email=email,
        first_name=first_name,
        last_name=last_name,
        is_admin=admin,
        can_login=True,
    )
    db.session.add(user)
    db.session.commit()
    click.echo(f"User {username} added")


def register_commands(app: Flask) -> None:
    for command in (initdb, dropdb, createuser):
        app.cli.add_command(command)
