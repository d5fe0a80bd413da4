import click
import yaml
from pydantic import ValidationError
from ucsb_backend.database import get_db
from ucsb_backend.interface.organizations import UCSBOrganizationCreate, UCSBOrganizationInterface
from ucsb_backend.repositories.base import DuplicateError
from ucsb_backend.repositories.organization import UCSBOrganizationRepository

def read_organizations_from_file(filename: str) -> list[UCSBOrganizationCreate]:
  with open(filename, "r") as file:
    raw = yaml.safe_load(file) or {}

  entries = raw.get("organizations", []) if isinstance(raw, dict) else raw

  return [UCSBOrganizationCreate.model_validate(entry) for entry in entries]

@click.command()
@click.option("--active", "-a", is_flag=True, default=False, help="Only list active organizations")
def list_organizations(active):

  with next(get_db()) as db:
    repository = UCSBOrganizationRepository(db)
    organizations = repository.find_active() if active else repository.list()

    if len(organizations) == 0:
      click.echo("No organizations found.")
      return

    for organization in organizations:
      status = click.style("inactive", fg="yellow") if organization.inactive else click.style("active", fg="green")
      click.echo(f"[{click.style(organization.org_code, fg='green')}] {organization.org_translation_short} | {organization.org_translation} ({status})")

@click.command()
@click.option("--file", "-f", "filename", type=click.Path(exists=True, dir_okay=False), prompt="File")
@click.option("--upsert", is_flag=True, default=False, help="Overwrite organizations that already exist")
def import_organizations(filename, upsert):

  try:
    entries = read_organizations_from_file(filename)
  except ValidationError as e:
    raise click.ClickException(f"Invalid organization file: {e}")

  saved = 0
  skipped = 0

  with next(get_db()) as db:
    repository = UCSBOrganizationRepository(db)

    for entry in entries:
      db_item = UCSBOrganizationInterface.model(**entry.model_dump())

      if upsert:
        repository.upsert(db_item)
        saved += 1
        click.echo(f"Saved [{click.style(entry.org_code, fg='green')}]")
        continue

      try:
        repository.insert(db_item)
        saved += 1
        click.echo(f"Created [{click.style(entry.org_code, fg='green')}]")
      except DuplicateError:
        skipped += 1
        click.echo(f"Skipped [{click.style(entry.org_code, fg='red')}] already exists")

  click.echo(f"{saved} saved, {skipped} skipped")

@click.group()
def organizations():
    pass

organizations.add_command(list_organizations,"list")
organizations.add_command(import_organizations,"import")
