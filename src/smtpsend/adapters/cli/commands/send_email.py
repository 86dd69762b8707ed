"""Send email CLI command.

Builds a sender from the ``[email]`` configuration section plus any
command-line overrides, then sends one plain-text or HTML message.
"""

from __future__ import annotations

import logging
import os
import smtplib
from collections.abc import Callable
from pathlib import Path
from typing import NoReturn

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config
from pydantic import ValidationError as PydanticValidationError

from smtpsend.adapters.email.config import SenderConfig
from smtpsend.adapters.email.options import (
    SenderOption,
    options_from_config,
    with_dialer,
    with_from,
    with_host,
    with_password,
    with_port,
    with_ssl,
    with_username,
)
from smtpsend.adapters.email.sender import EmailSender, new_email_sender
from smtpsend.application.ports import LoadSenderConfigFromDict
from smtpsend.domain.errors import ConfigurationError, ValidationError
from smtpsend.domain.message import Email

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _load_sender_config(config: Config, loader: LoadSenderConfigFromDict) -> SenderConfig:
    """Parse the ``[email]`` section, exiting with CONFIG_ERROR when invalid."""
    try:
        return loader(config.as_dict())
    except PydanticValidationError as exc:
        _fail(exc, "Invalid email configuration", "Invalid email configuration", exit_code=ExitCode.CONFIG_ERROR)


def _override_options(
    *,
    host: str | None,
    port: int | None,
    username: str | None,
    password: str | None,
    from_address: str | None,
    use_ssl: bool | None,
) -> list[SenderOption]:
    """Return option functions for the overrides actually given on the command line."""
    overrides: list[tuple[object, Callable[..., SenderOption]]] = [
        (host, with_host),
        (port, with_port),
        (username, with_username),
        (password, with_password),
        (from_address, with_from),
        (use_ssl, with_ssl),
    ]
    return [factory(value) for value, factory in overrides if value is not None]


def _require_host(sender: EmailSender) -> None:
    """Raise ConfigurationError when no SMTP host is configured."""
    if not sender.config.host:
        raise ConfigurationError("No SMTP host configured (set email.host or pass --host)")


def _require_usable_tls(sender: EmailSender) -> None:
    """Raise ConfigurationError when the configured CA or client certificate cannot be loaded."""
    tls = sender.config.tls
    if tls is None:
        return
    try:
        tls.to_ssl_context()
    except OSError as exc:
        raise ConfigurationError(f"Invalid TLS settings in email.tls: {exc}") from exc


def _fail(
    exc: BaseException,
    log_message: str,
    user_message: str,
    *,
    exit_code: ExitCode,
    log_traceback: bool = False,
) -> NoReturn:
    """Log *exc*, print a one-line error and exit with *exit_code*."""
    logger.error(
        log_message,
        extra={"error": str(exc), "error_type": type(exc).__name__},
        exc_info=log_traceback,
    )
    click.echo(f"\nError: {user_message} - {exc}", err=True)
    raise SystemExit(exit_code)


def _send_with_error_handling(sender: EmailSender, email: Email) -> None:
    """Send *email* and map every failure onto an exit code.

    Handlers run most specific first: FileNotFoundError must precede the
    OSError branch it inherits from.

    Set ``DEVELOPMENT_MODE`` to re-raise unexpected exceptions with their
    full traceback.
    """
    try:
        _require_host(sender)
        _require_usable_tls(sender)
        sender.send(email)
    except ConfigurationError as exc:
        _fail(exc, "Email configuration error", "Configuration error", exit_code=ExitCode.CONFIG_ERROR)
    except ValidationError as exc:
        _fail(exc, "Invalid email parameters", "Invalid email parameters", exit_code=ExitCode.INVALID_ARGUMENT)
    except FileNotFoundError as exc:
        _fail(exc, "Attachment file not found", "Attachment file not found", exit_code=ExitCode.FILE_NOT_FOUND)
    except (smtplib.SMTPException, OSError) as exc:
        _fail(exc, "SMTP delivery failed", "Failed to send email", exit_code=ExitCode.SMTP_FAILURE)
    except Exception as exc:
        if os.environ.get("DEVELOPMENT_MODE"):
            raise
        _fail(
            exc,
            "Unexpected error sending email",
            "Unexpected error",
            exit_code=ExitCode.GENERAL_ERROR,
            log_traceback=True,
        )
    else:
        click.echo("\nEmail sent successfully!")
        logger.info("Email sent via CLI", extra={"recipients": list(email.recipients)})


@click.command("send-email", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--to", "recipients", multiple=True, help="Recipient email address (repeatable)")
@click.option("--subject", default="", help="Email subject line")
@click.option("--body", default="", help="Email body")
@click.option("--html", "is_html", is_flag=True, default=False, help="Send the body as text/html instead of text/plain")
@click.option(
    "--attachment",
    "attachments",
    multiple=True,
    type=click.Path(path_type=Path),
    help="File to attach (repeatable, attached in the given order)",
)
@click.option("--host", default=None, help="Override SMTP host")
@click.option("--port", type=int, default=None, help="Override SMTP port")
@click.option("--username", default=None, help="Override SMTP authentication username")
@click.option("--password", default=None, help="Override SMTP authentication password")
@click.option("--from", "from_address", default=None, help="Override sender address")
@click.option("--ssl/--no-ssl", "use_ssl", default=None, help="Override implicit TLS (SMTPS) setting")
@click.pass_context
def cli_send_email(
    ctx: click.Context,
    recipients: tuple[str, ...],
    subject: str,
    body: str,
    is_html: bool,
    attachments: tuple[Path, ...],
    host: str | None,
    port: int | None,
    username: str | None,
    password: str | None,
    from_address: str | None,
    use_ssl: bool | None,
) -> None:
    """Send an email using configured SMTP settings."""
    cli_ctx = get_cli_context(ctx)
    extra = {"command": "send-email", "recipients": list(recipients), "subject": subject}

    with lib_log_rich.runtime.bind(job_id="cli-send-email", extra=extra):
        sender_config = _load_sender_config(cli_ctx.config, cli_ctx.services.load_sender_config_from_dict)
        sender = new_email_sender(
            *options_from_config(sender_config),
            *_override_options(
                host=host,
                port=port,
                username=username,
                password=password,
                from_address=from_address,
                use_ssl=use_ssl,
            ),
            with_dialer(cli_ctx.services.dial_and_send),
        )
        email = Email(
            recipients=recipients,
            subject=subject,
            body=body,
            is_html=is_html,
            attachments=attachments,
        )
        _send_with_error_handling(sender, email)


__all__ = ["cli_send_email"]
