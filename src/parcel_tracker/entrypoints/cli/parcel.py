"""``tracker parcel``: register, inspect and edit parcels.

Every command builds the application from ``TRACKER_DB_URL`` and goes through
`ParcelService`, so the delivery rules (status only moves forward; address
changes and deletion only while registered) apply here too. ``set-status``
is the one escape hatch that writes a raw status straight to the store.

Parcel listings are written to **stdout**; confirmations and errors go to
**stderr**.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import click
import click_extra as clickx
from sqlalchemy.exc import OperationalError, ProgrammingError

from parcel_tracker import bootstrap
from parcel_tracker.config import DatabaseUrlNotSetError
from parcel_tracker.domain.errors import DomainError
from parcel_tracker.interfaces.parcel_store import ParcelStoreError

from .db import MISSING_DB_URL_MSG, UPGRADE_SCHEMA_INSTRUCTIONS
from .helpers import success

if TYPE_CHECKING:
    from parcel_tracker.domain.parcel import Parcel

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def format_parcel(parcel: Parcel) -> str:
    """One-line, human-readable rendering of a parcel."""
    return (
        f"Parcel #{parcel.number} to {parcel.address!r} from client {parcel.client}, "
        f"registered {parcel.created_at}, status: {parcel.status}"
    )


def _app() -> bootstrap.AppContainer:
    """Build the application; its engine is disposed when the command ends."""
    try:
        app = bootstrap.bootstrap()
    except DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e
    click.get_current_context().call_on_close(app.close)
    return app


def _reports_errors(func: F) -> F:
    """Turn store, domain and database errors into clean CLI failures (exit code 1)."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (ParcelStoreError, DomainError) as e:
            logger.debug("Command failed", exc_info=True)
            raise click.ClickException(str(e)) from e
        except (OperationalError, ProgrammingError) as e:
            # missing table, unreachable file, ...
            logger.debug("Database error", exc_info=True)
            raise click.ClickException(
                f"Database error: {e.orig}\n{UPGRADE_SCHEMA_INSTRUCTIONS}"
            ) from e

    return wrapper  # type: ignore[return-value]


@click.group(cls=clickx.ExtraGroup)
def parcel() -> None:
    """Parcel tracking commands."""


@parcel.command()
@click.option("--client", "-c", type=int, required=True, help="Client identifier.")
@click.option("--address", "-a", required=True, help="Delivery address.")
@_reports_errors
def register(client: int, address: str) -> None:
    """Register a new parcel and print its number."""
    registered = _app().parcel_service.register(client, address)
    click.echo(registered.number)
    success(f"Registered parcel #{registered.number}.")


@parcel.command()
@click.argument("number", type=int)
@_reports_errors
def show(number: int) -> None:
    """Show a single parcel."""
    click.echo(format_parcel(_app().parcel_service.get(number)))


@parcel.command(name="list")
@click.option("--client", "-c", type=int, required=True, help="Client identifier.")
@_reports_errors
def list_(client: int) -> None:
    """List every parcel of a client."""
    for found in _app().parcel_service.client_parcels(client):
        click.echo(format_parcel(found))


@parcel.command()
@click.argument("number", type=int)
@_reports_errors
def advance(number: int) -> None:
    """Move a parcel to its next delivery status."""
    updated = _app().parcel_service.advance_status(number)
    click.echo(updated.status)


@parcel.command(name="set-address")
@click.argument("number", type=int)
@click.argument("address")
@_reports_errors
def set_address(number: int, address: str) -> None:
    """Change the address of a parcel that is still registered."""
    _app().parcel_service.change_address(number, address)
    success(f"Parcel #{number} address changed.")


@parcel.command(name="set-status")
@click.argument("number", type=int)
@click.argument("status")
@_reports_errors
def set_status(number: int, status: str) -> None:
    """Write STATUS to a parcel as-is, bypassing the delivery rules."""
    _app().store.set_status(number, status)
    success(f"Parcel #{number} status set to {status!r}.")


@parcel.command()
@click.argument("number", type=int)
@_reports_errors
def delete(number: int) -> None:
    """Delete a parcel that is still registered."""
    _app().parcel_service.delete(number)
    success(f"Deleted parcel #{number}.")
