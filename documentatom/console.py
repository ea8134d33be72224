"""
Interactive console for exercising a DocumentAtom server through the SDK.
"""

import asyncio
import time
from pathlib import Path
from typing import Optional, List

import click

from .config import DocumentAtomSettings
from .core.exceptions import DocumentAtomError
from .core.logging import get_logger, log_async_function_call, severity_sink
from .core.models import (
    Atom,
    AtomList,
    OrderedListAtom,
    TableAtom,
    UnorderedListAtom,
)
from .sdk import DocumentAtomSdk

logger = get_logger(__name__)

PREVIEW_ATOMS = 5
PREVIEW_CHARS = 300

# command -> (label, AtomMethods attribute, asks for embedded-image OCR)
FORMAT_COMMANDS = {
    "csv": ("CSV", "process_csv", False),
    "excel": ("Excel", "process_excel", True),
    "html": ("HTML", "process_html", False),
    "json": ("JSON", "process_json", False),
    "markdown": ("Markdown", "process_markdown", False),
    "ocr": ("OCR", "process_ocr", False),
    "pdf": ("PDF", "process_pdf", True),
    "png": ("PNG", "process_png", False),
    "powerpoint": ("PowerPoint", "process_powerpoint", True),
    "rtf": ("RTF", "process_rtf", True),
    "text": ("Text", "process_text", False),
    "word": ("Word", "process_word", True),
    "xml": ("XML", "process_xml", False),
}

MENU = """
Available commands:
  ?               help, this menu
  q               quit
  cls             clear the screen
  debug           enable or disable debug (enabled: {debug})
  endpoint        set the DocumentAtom server endpoint (currently: {endpoint})
  key             set the access key for authentication

Health & Status:
  health          check if server is healthy
  status          get server status
  detect          test type detection

Document Processing:
  csv             process CSV document
  excel           process Excel document
  html            process HTML document
  json            process JSON document
  markdown        process Markdown document
  ocr             process image with OCR
  pdf             process PDF document
  png             process PNG image
  powerpoint      process PowerPoint document
  rtf             process RTF document
  text            process text document
  word            process Word document
  xml             process XML document
"""


def describe_atom(atom: Atom) -> str:
    """One-line summary of an atom for the result preview."""
    if isinstance(atom, TableAtom):
        content = f"Table with {atom.rows} rows, {atom.columns} columns"
    elif getattr(atom, "text", None):
        content = atom.text[:PREVIEW_CHARS]
    elif isinstance(atom, UnorderedListAtom) and atom.unordered_list:
        content = f"Unordered list with {len(atom.unordered_list)} items"
    elif isinstance(atom, OrderedListAtom) and atom.ordered_list:
        content = f"Ordered list with {len(atom.ordered_list)} items"
    else:
        content = "No text content"
    return f"Atom: {atom.type.value} - {content}..."


def atoms_to_json(atoms: List[Atom]) -> str:
    return AtomList.dump_json(atoms, by_alias=True, exclude_none=True, indent=2).decode("utf-8")


class ConsoleApp:
    """Menu-driven loop; every command handles its own errors."""

    def __init__(self, settings: DocumentAtomSettings, debug: bool = False):
        self.settings = settings
        self.endpoint = settings.endpoint
        self.access_key = settings.access_key
        self.debug = debug
        self.sdk: Optional[DocumentAtomSdk] = None
        self.running = True

        self.commands = {
            "?": self.show_menu,
            "q": self.quit,
            "cls": click.clear,
            "debug": self.toggle_debug,
            "endpoint": self.set_endpoint,
            "key": self.set_access_key,
            "health": lambda: self._run("checking health", self._health()),
            "status": lambda: self._run("getting status", self._status()),
            "detect": lambda: self._run("in type detection", self._detect()),
        }
        for command, (label, method, asks_ocr) in FORMAT_COMMANDS.items():
            self.commands[command] = self._format_handler(label, method, asks_ocr)

    def _format_handler(self, label: str, method: str, asks_ocr: bool):
        return lambda: self._run(f"processing {label}", self._process_document(label, method, asks_ocr))

    def initialize_sdk(self) -> None:
        try:
            logger.set_level("DEBUG" if self.debug else self.settings.log_level)
            self.sdk = DocumentAtomSdk(
                self.endpoint,
                access_key=self.access_key,
                timeout_ms=self.settings.timeout_ms,
                log_requests=self.debug,
                log_responses=self.debug,
                logger=severity_sink(logger),
            )
            click.echo(f"SDK initialized with endpoint: {self.sdk.endpoint}")
            if self.access_key:
                click.echo(f"Access key configured: {self.access_key[:8]}...")
        except DocumentAtomError as e:
            self.sdk = None
            click.echo(f"Error initializing SDK: {e}")

    def run(self) -> None:
        click.echo("DocumentAtom SDK Test Application")
        click.echo("=================================")
        click.echo()

        self.initialize_sdk()

        while self.running:
            command = click.prompt("Command [? for help]", default="", show_default=False).strip()
            if not command:
                continue
            handler = self.commands.get(command)
            if handler is None:
                click.echo("Unknown command. Type '?' for help.")
                continue
            handler()

        click.echo("Goodbye!")

    def show_menu(self) -> None:
        click.echo(MENU.format(debug=self.debug, endpoint=self.endpoint))

    def quit(self) -> None:
        self.running = False

    def toggle_debug(self) -> None:
        self.debug = not self.debug
        logger.set_level("DEBUG" if self.debug else self.settings.log_level)
        if self.sdk is not None:
            self.sdk.log_requests = self.debug
            self.sdk.log_responses = self.debug
        click.echo("Debug mode: " + ("enabled" if self.debug else "disabled"))

    def set_endpoint(self) -> None:
        endpoint = click.prompt("DocumentAtom server endpoint", default=self.endpoint).strip()
        if endpoint:
            self.endpoint = endpoint
            self.initialize_sdk()

    def set_access_key(self) -> None:
        key = click.prompt("Access key (ENTER to clear)", default="", show_default=False).strip()
        self.access_key = key or None
        self.initialize_sdk()

    def _run(self, action: str, coro) -> None:
        """Run one command to completion, reporting instead of raising."""
        if self.sdk is None:
            coro.close()
            click.echo("SDK not initialized.")
            return
        try:
            asyncio.run(coro)
        except Exception as e:
            click.echo(f"Error {action}: {e}")
            if self.debug:
                logger.log_error(e, context={"action": action})

    def _read_file(self, prompt: str) -> Optional[bytes]:
        filename = click.prompt(prompt, default="", show_default=False).strip()
        path = Path(filename)
        if not filename or not path.is_file():
            click.echo("File not found.")
            return None
        return path.read_bytes()

    @log_async_function_call()
    async def _health(self) -> None:
        click.echo("Checking server health...")
        healthy = await self.sdk.health.is_healthy()
        click.echo(f"Server is {'healthy' if healthy else 'unhealthy'}")

    @log_async_function_call()
    async def _status(self) -> None:
        click.echo("Getting server status...")
        status = await self.sdk.health.get_status()
        click.echo(f"Server status: {status or 'No response'}")

    @log_async_function_call()
    async def _detect(self) -> None:
        data = self._read_file("File path for type detection")
        if data is None:
            return

        content_type = click.prompt("Content-type", default="", show_default=False).strip() or None
        click.echo(f"Detecting type ({len(data)} bytes)...")
        if content_type:
            click.echo(f"Using content type hint: {content_type}")

        result = await self.sdk.type_detection.detect_type(data, content_type)
        if result is None:
            click.echo("No type detection result received.")
            return

        click.echo("Type detection result:")
        click.echo(f"  MIME Type: {result.mime_type or 'Unknown'}")
        click.echo(f"  Extension: {result.extension or 'Unknown'}")
        click.echo(f"  Document Type: {result.type.value}")
        click.echo()
        click.echo("Full JSON response:")
        click.echo(result.to_json(indent=2))

    @log_async_function_call()
    async def _process_document(self, label: str, method: str, asks_ocr: bool) -> None:
        data = self._read_file(f"File path for {label} processing")
        if data is None:
            return

        extract_ocr = click.confirm("Extract OCR from images?", default=False) if asks_ocr else False
        click.echo(f"Processing {label} file ({len(data)} bytes)...")

        process = getattr(self.sdk.atom, method)
        started = time.perf_counter()
        atoms = await (process(data, extract_ocr) if asks_ocr else process(data))
        elapsed_ms = (time.perf_counter() - started) * 1000

        if atoms is None:
            click.echo("No atoms extracted.")
            return

        click.echo(f"Processing completed in {elapsed_ms:.2f}ms")
        click.echo(f"Extracted {len(atoms)} atoms:")
        click.echo()
        for atom in atoms[:PREVIEW_ATOMS]:
            click.echo(describe_atom(atom))
        if len(atoms) > PREVIEW_ATOMS:
            click.echo(f"... and {len(atoms) - PREVIEW_ATOMS} more atoms")
        click.echo()
        click.echo("Full result:")
        click.echo(atoms_to_json(atoms))


@click.command()
@click.option("-e", "--endpoint", help="DocumentAtom server endpoint")
@click.option("-k", "--access-key", help="Access key for bearer authentication")
@click.option("--env-file", type=click.Path(exists=True, dir_okay=False), help=".env file to load")
@click.option("-d", "--debug", is_flag=True, help="Log requests and responses")
def main(endpoint: Optional[str], access_key: Optional[str], env_file: Optional[str], debug: bool) -> None:
    """DocumentAtom SDK test application."""
    try:
        settings = DocumentAtomSettings.from_env(env_file)
    except DocumentAtomError as e:
        raise click.ClickException(str(e))

    overrides = {}
    if endpoint:
        overrides["endpoint"] = endpoint
    if access_key:
        overrides["access_key"] = access_key
    if overrides:
        settings = settings.model_copy(update=overrides)

    ConsoleApp(settings, debug=debug or settings.log_requests).run()
