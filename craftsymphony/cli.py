import click
from flask.cli import with_appcontext

from craftsymphony import db


@click.command("init-db")
@click.option("--drop", is_flag=True, help="Drop existing tables first.")
@with_appcontext
def init_db_command(drop):
    """Create the catalog tables."""
    if drop:
        db.drop_all()
        click.echo("Dropped existing tables")
    db.create_all()
    click.echo("Database initialized")
