import json
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ValidationError
from rich import print
from rich.table import Table
import typer

from stripe_contracts.core.config import cli_logger, settings
from stripe_contracts.services.stripe.types import (
    FAMILIES,
    FAMILY_RESOURCES,
    MODEL_REGISTRY,
    family_models,
)

app = typer.Typer()


def _resolve_model(name: str) -> type[BaseModel]:
    """Look a model up by class name, failing the command when it is unknown."""
    model = MODEL_REGISTRY.get(name)
    if model is None:
        print(f"[red]Error: unknown model {name!r}[/red]")
        print("[cyan]Run 'python manage.py resources' to list the available models[/cyan]")
        raise typer.Exit(1)
    return model


def _type_label(annotation) -> str:
    if isinstance(annotation, type):
        return annotation.__name__
    return str(annotation).replace("typing.", "").replace(
        "stripe_contracts.services.stripe.types.", ""
    )


@app.command()
def resources():
    """
    Lists every resource family with the models it declares.

    Examples:
        python manage.py resources
    """
    table = Table(title=f"Stripe resource families (API {settings.STRIPE_API_VERSION})")
    table.add_column("Family", style="cyan")
    table.add_column("Resource")
    table.add_column("Models", justify="right")

    for family in FAMILIES:
        models = family_models(family)
        table.add_row(family, FAMILY_RESOURCES[family].__name__, str(len(models)))
    print(table)


@app.command()
def describe(model: Annotated[str, typer.Argument(help="Model class name, e.g. Plan")]):
    """
    Shows the fields of a model with their types and whether they are required.

    Examples:
        python manage.py describe Plan
        python manage.py describe InvoiceCreateParams
    """
    model_cls = _resolve_model(model)
    table = Table(title=model_cls.__name__)
    table.add_column("Field", style="cyan")
    table.add_column("Type")
    table.add_column("Required", justify="center")

    for name, field in model_cls.model_fields.items():
        table.add_row(
            name,
            _type_label(field.annotation),
            "[green]yes[/green]" if field.is_required() else "no",
        )
    print(table)


@app.command()
def validate(
    model: Annotated[str, typer.Argument(help="Model class name, e.g. Plan")],
    file: Annotated[
        Path,
        typer.Argument(exists=True, dir_okay=False, help="JSON document to validate"),
    ],
):
    """
    Validates a JSON document against a model.

    Exits with status 1 and prints every validation error when the document
    does not match.

    Examples:
        python manage.py validate Plan plan.json
        python manage.py validate WebhookEndpointCreateParams endpoint.json
    """
    model_cls = _resolve_model(model)
    try:
        model_cls.model_validate_json(file.read_bytes())
    except ValidationError as e:
        cli_logger.warning(f"{file} failed validation against {model_cls.__name__}")
        print(
            f"[red]{file.name} is not a valid {model_cls.__name__} "
            f"({e.error_count()} errors)[/red]"
        )
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"]) or "<root>"
            print(f"  - {location}: {error['msg']}")
        raise typer.Exit(1)
    print(f"[green]{file.name} is a valid {model_cls.__name__}[/green]")


@app.command()
def generateschema(
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Where to write the JSON Schema"),
    ] = Path("schema.json"),
):
    """
    Generates the JSON Schema of every model and saves it to a JSON file.

    Examples:
        python manage.py generateschema
        python manage.py generateschema --output build/stripe.schema.json
    """
    schema = {
        "title": settings.APP_NAME,
        "stripe_api_version": settings.STRIPE_API_VERSION,
        "models": {
            name: model.model_json_schema() for name, model in MODEL_REGISTRY.items()
        },
    }
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8") as f:
        json.dump(schema, f, ensure_ascii=False, indent=2)
    cli_logger.info(f"Wrote {len(MODEL_REGISTRY)} model schemas to {output}")
    print(f"[green]JSON Schema generated at {output}[/green]")


@app.callback()
def main(ctx: typer.Context):
    print(f"Executing the command: {ctx.invoked_subcommand}")


if __name__ == "__main__":
    app()
