"""Config CLI commands for Pay Desk.

Shows where configuration is read from and which credentials are active.
"""

import click

from paydesk.sdk import (
    get_config_dir,
    get_profile_path,
    load_profile,
    load_credentials,
    describe_credentials_source,
    ProfileError,
)


@click.group()
def config():
    """Inspect configuration (profile.yaml).

    The profile may define a 'login' section with 'username' (letters)
    and 'password' (digits). Without it the built-in credentials apply.
    """
    pass


@config.command("show")
def config_show():
    """Show config paths and the active login credentials."""
    profile_path = get_profile_path()

    click.echo(f"Config directory: {get_config_dir()}")
    click.echo(f"Profile file: {profile_path}")
    click.echo(f"File exists: {profile_path.exists()}")
    click.echo()

    try:
        profile = load_profile()
        credentials = load_credentials(profile)
    except ProfileError as e:
        raise click.ClickException(str(e))

    click.echo("Login credentials:")
    click.echo(f"  source: {describe_credentials_source(profile)}")
    click.echo(f"  username: {credentials.username}")
    click.echo(f"  password: {'*' * len(credentials.password)}")
