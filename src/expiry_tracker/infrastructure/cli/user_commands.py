"""CLI commands for the User aggregate."""

from __future__ import annotations

import click

from expiry_tracker.application.dto import UserRegistration
from expiry_tracker.application.register_user import RegisterUserHandler
from expiry_tracker.domain.exceptions import DomainException
from expiry_tracker.infrastructure.bootstrap import user_repository


@click.command("register")
@click.option("--username", required=True, help="Login name.")
@click.option("--email", required=True, help="Email address.")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="Password (min. 8 characters).",
)
def user_register(username: str, email: str, password: str) -> None:
    """Register a new user."""
    handler = RegisterUserHandler(user_repo=user_repository())

    try:
        user = handler.handle(UserRegistration(username, email, password))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User '{user.username}' registered ({user.id})")
