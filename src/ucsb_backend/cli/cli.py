import click
import uvicorn

from .db import db
from .organizations import organizations

@click.command()
@click.option("--host", "-h", default="0.0.0.0")
@click.option("--port", "-p", default=8000, type=int)
@click.option("--reload", is_flag=True, default=False)
def serve(host, port, reload):
    uvicorn.run("ucsb_backend.server:app", host=host, port=port, reload=reload, workers=1)

@click.group()
def cli():
    pass

cli.add_command(db,"db")
cli.add_command(organizations,"organizations")
cli.add_command(serve,"serve")

if __name__ == '__main__':
    cli()
