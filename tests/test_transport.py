"""SMTP transport stories: MIME assembly and the dial-and-send session.

``smtplib.SMTP`` and ``smtplib.SMTP_SSL`` are patched so no socket is ever
opened; the mocks act as their own context managers.
"""

from __future__ import annotations

import smtplib
import ssl
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from smtpsend.adapters.email.config import SenderConfig, TlsSettings
from smtpsend.adapters.email.options import with_from, with_host
from smtpsend.adapters.email.sender import new_email_sender
from smtpsend.adapters.email.transport import build_mime_message, dial_and_send
from smtpsend.domain.enums import ContentType
from smtpsend.domain.errors import NoSenderError
from smtpsend.domain.message import Email, OutgoingMessage


def _message(**overrides: object) -> OutgoingMessage:
    values: dict[str, object] = {
        "from_address": "a@example.com",
        "recipients": ("b@example.com",),
        "subject": "Hi",
        "body": "hello",
        "content_type": ContentType.PLAIN,
        "attachments": (),
    }
    values.update(overrides)
    return OutgoingMessage(**values)  # type: ignore[arg-type]


def _session(*, starttls: bool) -> MagicMock:
    smtp = MagicMock()
    smtp.__enter__.return_value = smtp
    smtp.__exit__.return_value = False
    smtp.has_extn.return_value = starttls
    return smtp


@pytest.fixture
def smtp_session() -> Iterator[MagicMock]:
    """Patch plain SMTP with a session that does not advertise STARTTLS."""
    session = _session(starttls=False)
    with patch("smtplib.SMTP", return_value=session) as factory:
        session.factory = factory
        yield session


@pytest.fixture
def starttls_session() -> Iterator[MagicMock]:
    """Patch plain SMTP with a session that advertises STARTTLS."""
    session = _session(starttls=True)
    with patch("smtplib.SMTP", return_value=session) as factory:
        session.factory = factory
        yield session


# ======================== MIME assembly ========================


@pytest.mark.os_agnostic
def test_mime_message_carries_headers() -> None:
    """From, To and Subject are set verbatim; Date and Message-ID are added."""
    mime = build_mime_message(_message(recipients=("b@example.com", "c@example.com")))

    assert mime["From"] == "a@example.com"
    assert mime["To"] == "b@example.com, c@example.com"
    assert mime["Subject"] == "Hi"
    assert mime["Date"]
    assert mime["Message-ID"]


@pytest.mark.os_agnostic
def test_mime_message_plain_body() -> None:
    """Plain bodies are text/plain."""
    mime = build_mime_message(_message())

    assert mime.get_content_type() == "text/plain"
    assert mime.get_content().strip() == "hello"


@pytest.mark.os_agnostic
def test_mime_message_html_body() -> None:
    """HTML bodies are text/html with markup intact."""
    mime = build_mime_message(_message(body="<b>hi</b>", content_type=ContentType.HTML))

    assert mime.get_content_type() == "text/html"
    assert "<b>hi</b>" in mime.get_content()


@pytest.mark.os_agnostic
def test_mime_message_attachments_keep_order_and_names(attachment_files: list[Path]) -> None:
    """Attachments appear in the supplied order with their base names."""
    mime = build_mime_message(_message(attachments=tuple(attachment_files)))

    parts = list(mime.iter_attachments())

    assert [part.get_filename() for part in parts] == ["notes.txt", "report.pdf", "photo.png"]
    assert [part.get_content_type() for part in parts] == ["text/plain", "application/pdf", "image/png"]


@pytest.mark.os_agnostic
def test_mime_message_attachment_content_is_file_bytes(attachment_files: list[Path]) -> None:
    """Each attachment carries the file's contents."""
    mime = build_mime_message(_message(attachments=(attachment_files[1],)))

    (part,) = list(mime.iter_attachments())

    assert part.get_payload(decode=True) == attachment_files[1].read_bytes()


@pytest.mark.os_agnostic
def test_mime_message_unknown_extension_is_octet_stream(tmp_path: Path) -> None:
    """Files without a known type are sent as application/octet-stream."""
    blob = tmp_path / "data.unknownext"
    blob.write_bytes(b"\x00\x01")

    (part,) = list(build_mime_message(_message(attachments=(blob,))).iter_attachments())

    assert part.get_content_type() == "application/octet-stream"


@pytest.mark.os_agnostic
def test_mime_message_missing_attachment_raises(tmp_path: Path) -> None:
    """A missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        build_mime_message(_message(attachments=(tmp_path / "missing.txt",)))


# ======================== Plain SMTP session ========================


@pytest.mark.os_agnostic
def test_dial_connects_to_configured_host_and_port(smtp_session: MagicMock) -> None:
    """Plain SMTP is opened with the configured host and port."""
    dial_and_send(_message(), config=SenderConfig(host="smtp.example.com", port=587))

    smtp_session.factory.assert_called_once_with("smtp.example.com", 587)


@pytest.mark.os_agnostic
def test_dial_sends_envelope_and_mime(smtp_session: MagicMock) -> None:
    """send_message receives the MIME message and the envelope addresses."""
    dial_and_send(
        _message(recipients=("b@example.com", "c@example.com")),
        config=SenderConfig(host="smtp.example.com", port=25),
    )

    smtp_session.send_message.assert_called_once()
    args, kwargs = smtp_session.send_message.call_args
    assert args[0]["Subject"] == "Hi"
    assert kwargs["from_addr"] == "a@example.com"
    assert kwargs["to_addrs"] == ["b@example.com", "c@example.com"]


@pytest.mark.os_agnostic
def test_dial_skips_starttls_when_not_offered(smtp_session: MagicMock) -> None:
    """Servers without STARTTLS get a plain session."""
    dial_and_send(_message(), config=SenderConfig(host="smtp.example.com", port=25))

    smtp_session.starttls.assert_not_called()


@pytest.mark.os_agnostic
def test_dial_upgrades_with_starttls_when_offered(starttls_session: MagicMock) -> None:
    """STARTTLS is negotiated with an SSL context and followed by a fresh EHLO."""
    dial_and_send(_message(), config=SenderConfig(host="smtp.example.com", port=587))

    starttls_session.starttls.assert_called_once()
    context = starttls_session.starttls.call_args.kwargs["context"]
    assert isinstance(context, ssl.SSLContext)
    assert starttls_session.ehlo.call_count == 2


@pytest.mark.os_agnostic
def test_dial_starttls_uses_configured_tls_settings(starttls_session: MagicMock) -> None:
    """TLS settings shape the STARTTLS context."""
    config = SenderConfig(host="smtp.example.com", port=587, tls=TlsSettings(verify=False))

    dial_and_send(_message(), config=config)

    context = starttls_session.starttls.call_args.kwargs["context"]
    assert context.verify_mode == ssl.CERT_NONE


@pytest.mark.os_agnostic
def test_dial_logs_in_when_username_set(smtp_session: MagicMock) -> None:
    """Credentials are used when a username is configured."""
    dial_and_send(_message(), config=SenderConfig(host="smtp.example.com", port=587, username="u", password="p"))

    smtp_session.login.assert_called_once_with("u", "p")


@pytest.mark.os_agnostic
def test_dial_skips_login_without_username(smtp_session: MagicMock) -> None:
    """No username means no AUTH, even when a password is set."""
    dial_and_send(_message(), config=SenderConfig(host="smtp.example.com", port=25, password="p"))

    smtp_session.login.assert_not_called()


@pytest.mark.os_agnostic
def test_dial_closes_session_after_send(smtp_session: MagicMock) -> None:
    """The connection is released when the transaction ends."""
    dial_and_send(_message(), config=SenderConfig(host="smtp.example.com", port=25))

    smtp_session.__exit__.assert_called_once()


# ======================== Implicit TLS session ========================


@pytest.mark.os_agnostic
def test_dial_uses_smtp_ssl_when_requested() -> None:
    """use_ssl opens SMTP_SSL with an SSL context and never STARTTLS."""
    session = _session(starttls=True)
    with patch("smtplib.SMTP_SSL", return_value=session) as ssl_factory, patch("smtplib.SMTP") as plain_factory:
        dial_and_send(_message(), config=SenderConfig(host="smtp.example.com", port=465, use_ssl=True))

    plain_factory.assert_not_called()
    args, kwargs = ssl_factory.call_args
    assert args == ("smtp.example.com", 465)
    assert isinstance(kwargs["context"], ssl.SSLContext)
    session.starttls.assert_not_called()
    session.send_message.assert_called_once()


# ======================== Failures ========================


@pytest.mark.os_agnostic
def test_dial_missing_attachment_fails_before_connecting(tmp_path: Path) -> None:
    """Attachment I/O errors surface before any connection is opened."""
    with patch("smtplib.SMTP") as factory, pytest.raises(FileNotFoundError):
        dial_and_send(
            _message(attachments=(tmp_path / "missing.txt",)),
            config=SenderConfig(host="smtp.example.com", port=25),
        )

    factory.assert_not_called()


@pytest.mark.os_agnostic
def test_dial_reraises_smtp_errors_unchanged(smtp_session: MagicMock) -> None:
    """Server rejections propagate as the same exception object."""
    failure = smtplib.SMTPRecipientsRefused({"b@example.com": (550, b"no such user")})
    smtp_session.send_message.side_effect = failure

    with pytest.raises(smtplib.SMTPRecipientsRefused) as exc_info:
        dial_and_send(_message(), config=SenderConfig(host="smtp.example.com", port=25))

    assert exc_info.value is failure


@pytest.mark.os_agnostic
def test_dial_reraises_authentication_errors(smtp_session: MagicMock) -> None:
    """Rejected credentials surface as SMTPAuthenticationError."""
    smtp_session.login.side_effect = smtplib.SMTPAuthenticationError(535, b"bad credentials")

    with pytest.raises(smtplib.SMTPAuthenticationError):
        dial_and_send(_message(), config=SenderConfig(host="smtp.example.com", port=587, username="u"))

    smtp_session.send_message.assert_not_called()


@pytest.mark.os_agnostic
def test_dial_reraises_connection_errors() -> None:
    """Refused connections surface as the socket error."""
    with (
        patch("smtplib.SMTP", side_effect=ConnectionRefusedError("refused")),
        pytest.raises(ConnectionRefusedError),
    ):
        dial_and_send(_message(), config=SenderConfig(host="smtp.example.com", port=25))


@pytest.mark.os_agnostic
@pytest.mark.parametrize("use_ssl", [False, True])
def test_dial_with_unset_port_fails_without_dialing(use_ssl: bool) -> None:
    """Port 0 is a delivery failure, never a silent fallback to 25 or 465."""
    with patch("socket.create_connection") as connect, pytest.raises(OSError, match="no SMTP port configured"):
        dial_and_send(_message(), config=SenderConfig(host="smtp.example.com", port=0, use_ssl=use_ssl))

    connect.assert_not_called()


@pytest.mark.os_agnostic
def test_sender_built_without_port_fails_at_delivery() -> None:
    """A sender left at the zero port reaches the transport and fails there."""
    sender = new_email_sender(with_host("smtp.example.com"), with_from("a@example.com"))

    with patch("socket.create_connection") as connect, pytest.raises(OSError):
        sender.send(Email(recipients=["b@example.com"]))

    connect.assert_not_called()


@pytest.mark.os_agnostic
def test_dial_with_empty_sender_fails_without_dialing() -> None:
    """An empty From never goes out as the null reverse-path."""
    with patch("smtplib.SMTP") as factory, pytest.raises(NoSenderError, match="^no sender address specified$"):
        dial_and_send(_message(from_address=""), config=SenderConfig(host="smtp.example.com", port=25))

    factory.assert_not_called()
