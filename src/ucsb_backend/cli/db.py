import click
from ucsb_backend.database import create_tables

@click.command()
def create():
  create_tables()
  click.echo(f"[{click.style('COMPLETED',fg='green')}] Tables created")

@click.group()
def db():
    pass

db.add_command(create,"create")
