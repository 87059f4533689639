#!/usr/bin/env python3
"""
Directory Commander - Interactive Directory Browsing and File Operations

A menu-driven console file manager. Open a directory and work with the files
inside it, or create new directories, without leaving the terminal.

Features:
- 📂 Open Directory - List contents (flat or recursive), copy, move and view files
- 📁 Create Directory - Create a directory together with any missing parents
- 🔁 Overwrite Protection - Confirm before an existing file is replaced

Every operation runs synchronously against the local filesystem and reports
its outcome before control returns to the menu. Binary files are printed as
text, and nothing guards against another process changing the same paths
while an operation runs.
"""

import errno
import logging
import os
import re
import shutil
from enum import Enum, IntEnum
from pathlib import Path
from typing import Callable, Dict, Iterator, List, NamedTuple, Optional, TextIO

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import IntPrompt, InvalidResponse, Prompt
from rich.table import Table
from rich.text import Text

app = typer.Typer(add_completion=False)
logger = logging.getLogger("dir_commander")

# =============================================================================
# CONSTANTS - Menu text, path rules and messages
# =============================================================================

APP_NAME = "Directory Commander"

GOODBYE_MESSAGE = "Exiting program. Goodbye!"
INVALID_NUMBER_MESSAGE = "Invalid input. Please enter a number."
INVALID_CHOICE_MESSAGE = "Invalid choice. Returning to Main Menu."

# Conservative whitelist: <>:"|?* are rejected everywhere except the colon of
# an optional drive prefix such as "C:/"
VALID_PATH_PATTERN = re.compile(r'([a-zA-Z]:[\\/])?([^<>:"|?*]+[\\/])*[^<>:"|?*]*')

# Answers accepted by yes/no confirmations, anything else declines
CONFIRM_ANSWERS = {"y", "yes"}


class MainChoice(IntEnum):
    OPEN_DIRECTORY = 1
    CREATE_DIRECTORY = 2
    EXIT = 3


class SessionChoice(IntEnum):
    LIST = 1
    LIST_RECURSIVE = 2
    COPY = 3
    MOVE = 4
    TRANSFER = 5
    VIEW = 6
    RETURN = 7


MAIN_MENU_OPTIONS = [
    (MainChoice.OPEN_DIRECTORY, "📂 Open directory (view, move or copy files)"),
    (MainChoice.CREATE_DIRECTORY, "📁 Create a new directory"),
    (MainChoice.EXIT, "❌ Exit"),
]

SESSION_MENU_OPTIONS = [
    (SessionChoice.LIST, "📋 Display files in the directory"),
    (SessionChoice.LIST_RECURSIVE, "🌲 Display files recursively (including subdirectories)"),
    (SessionChoice.COPY, "📄 Copy a file from this directory"),
    (SessionChoice.MOVE, "🚚 Move a file from this directory"),
    (SessionChoice.TRANSFER, "🔀 Copy or move a file (type Copy or Move)"),
    (SessionChoice.VIEW, "👀 View the contents of a text file"),
    (SessionChoice.RETURN, "↩️ Return to Main Menu"),
]


# =============================================================================
# FILESYSTEM LAYER - Native errors mapped to explicit result values
# =============================================================================


class FsErrorKind(Enum):
    NOT_FOUND = "not found"
    NOT_A_DIRECTORY = "not a directory"
    NOT_A_FILE = "not a regular file"
    ALREADY_EXISTS = "already exists"
    SAME_FILE = "same file"
    INVALID_PATH = "invalid path"
    PERMISSION_DENIED = "permission denied"
    NO_SPACE = "no space left on device"
    CROSS_DEVICE = "cross-device move"
    CANCELLED = "cancelled by user"
    OS_ERROR = "filesystem error"


ERRNO_KINDS = {
    errno.ENOENT: FsErrorKind.NOT_FOUND,
    errno.ENOTDIR: FsErrorKind.NOT_A_DIRECTORY,
    errno.EISDIR: FsErrorKind.NOT_A_FILE,
    errno.EEXIST: FsErrorKind.ALREADY_EXISTS,
    errno.EACCES: FsErrorKind.PERMISSION_DENIED,
    errno.EPERM: FsErrorKind.PERMISSION_DENIED,
    errno.ENOSPC: FsErrorKind.NO_SPACE,
    errno.EXDEV: FsErrorKind.CROSS_DEVICE,
    errno.EINVAL: FsErrorKind.INVALID_PATH,
    errno.ENAMETOOLONG: FsErrorKind.INVALID_PATH,
}


class FsResult(NamedTuple):
    """
    Outcome of one filesystem call.

    A successful result carries an optional value (an entry path, a line, an
    open file handle). A failed one carries the error kind and a message that
    can be shown to the user as-is.
    """

    value: object = None
    error: Optional[FsErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value=None) -> "FsResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: FsErrorKind, message: str) -> "FsResult":
        return cls(error=error, message=message)

    @classmethod
    def from_os_error(cls, exc: OSError, path: Optional[Path] = None) -> "FsResult":
        """Translate a native OSError into a failure, keyed by its errno."""
        kind = ERRNO_KINDS.get(exc.errno, FsErrorKind.OS_ERROR)
        detail = exc.strerror or str(exc) or kind.value
        target = exc.filename if exc.filename is not None else path
        message = f"{detail}: {target}" if target is not None else detail
        return cls.failure(kind, message)


class FileSystem:
    """
    The host filesystem, as consumed by the commander.

    Predicates never raise. Every other call catches native errors where they
    happen and hands back an FsResult, so no OSError ever reaches the menus.
    """

    @staticmethod
    def exists(path: Path) -> bool:
        return os.path.exists(path)

    @staticmethod
    def is_directory(path: Path) -> bool:
        return os.path.isdir(path)

    @staticmethod
    def is_regular_file(path: Path) -> bool:
        return os.path.isfile(path)

    @staticmethod
    def is_same_file(first: Path, second: Path) -> bool:
        try:
            return os.path.samefile(first, second)
        except (OSError, ValueError):
            return False

    @staticmethod
    def list_entries(path: Path) -> Iterator[FsResult]:
        """Yield the direct entries of a directory in filesystem order."""
        logger.debug("Listing %s", path)
        try:
            with os.scandir(path) as scan:
                entries = [Path(entry.path) for entry in scan]
        except OSError as exc:
            yield FsResult.from_os_error(exc, path)
            return

        for entry in entries:
            yield FsResult.success(entry)

    @staticmethod
    def list_entries_recursive(path: Path) -> Iterator[FsResult]:
        """
        Yield every file and subdirectory below a directory, each exactly once.

        Unreadable directories show up as failures in the stream and the walk
        carries on with their siblings. Symlinked directories are listed but
        not descended into, so link cycles cannot loop forever.
        """
        logger.debug("Listing %s recursively", path)
        errors: List[OSError] = []

        for root, dirs, files in os.walk(path, onerror=errors.append):
            while errors:
                yield FsResult.from_os_error(errors.pop(0))
            for name in dirs + files:
                yield FsResult.success(Path(root) / name)

        for exc in errors:
            yield FsResult.from_os_error(exc)

    @staticmethod
    def create_directories(path: Path) -> FsResult:
        if FileSystem.exists(path):
            if FileSystem.is_directory(path):
                return FsResult.failure(
                    FsErrorKind.ALREADY_EXISTS, f"Directory already exists: {path}"
                )
            return FsResult.failure(
                FsErrorKind.ALREADY_EXISTS, f"A file already exists at: {path}"
            )

        logger.debug("Creating directory %s", path)
        try:
            path.mkdir(parents=True)
        except OSError as exc:
            return FsResult.from_os_error(exc, path)
        except ValueError as exc:
            return FsResult.failure(FsErrorKind.INVALID_PATH, f"{exc}: {path}")

        logger.info("Created directory %s", path)
        return FsResult.success(path)

    @staticmethod
    def copy_file(source: Path, destination: Path, overwrite: bool = False) -> FsResult:
        if not overwrite and FileSystem.exists(destination):
            return FsResult.failure(
                FsErrorKind.ALREADY_EXISTS, f"Destination file already exists: {destination}"
            )

        logger.debug("Copying %s -> %s (overwrite=%s)", source, destination, overwrite)
        try:
            shutil.copy2(source, destination)
        except shutil.SameFileError:
            return FsResult.failure(
                FsErrorKind.SAME_FILE, f"Source and destination are the same file: {source}"
            )
        except OSError as exc:
            return FsResult.from_os_error(exc, destination)

        logger.info("Copied %s -> %s", source, destination)
        return FsResult.success(destination)

    @staticmethod
    def move_file(source: Path, destination: Path, overwrite: bool = False) -> FsResult:
        """Rename source onto destination; a move across devices fails as CROSS_DEVICE."""
        if not overwrite and FileSystem.exists(destination):
            return FsResult.failure(
                FsErrorKind.ALREADY_EXISTS, f"Destination file already exists: {destination}"
            )

        logger.debug("Moving %s -> %s (overwrite=%s)", source, destination, overwrite)
        try:
            source.replace(destination)
        except OSError as exc:
            return FsResult.from_os_error(exc, source)

        logger.info("Moved %s -> %s", source, destination)
        return FsResult.success(destination)

    @staticmethod
    def open_for_read(path: Path) -> FsResult:
        # Undecodable bytes become U+FFFD, binary files print garbled
        try:
            handle = path.open("r", encoding="utf-8", errors="replace")
        except OSError as exc:
            return FsResult.from_os_error(exc, path)
        return FsResult.success(handle)

    @staticmethod
    def iter_lines(handle: TextIO, path: Path) -> Iterator[FsResult]:
        """Yield each line without its terminator; a read error ends the stream as a failure."""
        try:
            for line in handle:
                yield FsResult.success(line.rstrip("\n"))
        except OSError as exc:
            yield FsResult.from_os_error(exc, path)


# =============================================================================
# PATH UTILITIES - Normalization and validation of user-supplied paths
# =============================================================================


class PathUtils:
    """Turn raw user input into paths that are safe to hand to the filesystem."""

    @staticmethod
    def normalize_path(text: str) -> str:
        """Unify separators to '/' and drop trailing whitespace"""
        return text.replace("\\", "/").rstrip()

    @staticmethod
    def is_valid_path(text: str) -> bool:
        """
        Check a path string against the character whitelist.

        Empty strings are rejected, since Path("") would silently mean the
        current directory.
        """
        if not text or not text.strip():
            return False
        return VALID_PATH_PATTERN.fullmatch(text) is not None

    @staticmethod
    def join_path(base, name: str) -> Path:
        return Path(PathUtils.normalize_path(f"{base}/{name}"))


# =============================================================================
# SESSION VALUES - Explicit state threaded through the operations
# =============================================================================


class DirectorySession(NamedTuple):
    """The directory opened from the main menu, passed to every sub-menu action."""

    path: Path


class TransferAction(Enum):
    COPY = "Copy"
    MOVE = "Move"

    @classmethod
    def parse(cls, token: str) -> Optional["TransferAction"]:
        """Accept exactly 'Copy' or 'Move', nothing looser."""
        for action in cls:
            if action.value == token:
                return action
        return None

    @property
    def past_tense(self) -> str:
        return "copied" if self is TransferAction.COPY else "moved"


class TransferRequest(NamedTuple):
    source_dir: Path
    filename: str
    destination_dir: Path
    action: TransferAction

    @property
    def source(self) -> Path:
        return PathUtils.join_path(self.source_dir, self.filename)

    @property
    def destination(self) -> Path:
        return PathUtils.join_path(self.destination_dir, self.filename)


# =============================================================================
# CONSOLE UI - Prompts and consistent message formatting
# =============================================================================


class StreamPromptMixin:
    """
    Let a rich prompt read its answers from an explicit text stream.

    rich treats an exhausted stream as an empty answer and would re-prompt
    forever, so end of input is raised as EOFError here instead.
    """

    @classmethod
    def get_input(cls, console: Console, prompt, password: bool, stream: Optional[TextIO] = None) -> str:
        if stream is None:
            return super().get_input(console, prompt, password)

        console.print(prompt, end="")
        line = stream.readline()
        if not line:
            raise EOFError("input stream closed")
        return line


class TextPrompt(StreamPromptMixin, Prompt):
    pass


class MenuPrompt(StreamPromptMixin, IntPrompt):
    """Integer menu selection that warns on stderr and re-prompts on non-numbers."""

    validate_error_message = INVALID_NUMBER_MESSAGE
    error_console: Optional[Console] = None

    def on_validate_error(self, value: str, error: InvalidResponse) -> None:
        target = self.error_console or self.console
        target.print(f"[bold yellow]⚠️ WARNING:[/] {escape(str(error.message))}", emoji=False)


class UIUtils:
    """
    User interface helpers bound to one pair of consoles and one input source.

    Normal output (menus, listings, file contents) goes to the stdout console,
    errors and warnings go to the stderr console.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        input_stream: Optional[TextIO] = None,
    ):
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self.input_stream = input_stream

    def create_menu_table(self, title: str, options) -> Table:
        table = Table(title=title)
        table.add_column("Option", style="cyan", width=6)
        table.add_column("Description", style="white")
        table.show_lines = True
        table.header_style = "bold cyan"

        for choice, description in options:
            table.add_row(str(int(choice)), description)
        return table

    def show_menu(self, title: str, options):
        self.console.print(self.create_menu_table(title, options))
        self.print_separator()

    def ask_menu_choice(self, prompt: str = "Enter your choice") -> int:
        menu_prompt = MenuPrompt(prompt, console=self.console)
        menu_prompt.error_console = self.err_console
        return menu_prompt(stream=self.input_stream)

    def ask_text(self, prompt: str) -> str:
        return TextPrompt.ask(prompt, console=self.console, stream=self.input_stream)

    def confirm(self, question: str) -> bool:
        answer = self.ask_text(f"{question} [dim](y/n)[/dim]")
        return answer.strip().lower() in CONFIRM_ANSWERS

    def print_line(self, text: str):
        """Write user data verbatim; rich rendering would expand tabs and drop control characters"""
        self.console.file.write(text + "\n")

    def print_success(self, message: str):
        self.console.print(f"[bold green]✅ SUCCESS:[/] {escape(message)}", soft_wrap=True, emoji=False)

    def print_info(self, message: str):
        self.console.print(f"[bold cyan]ℹ️ INFO:[/] {escape(message)}", soft_wrap=True, emoji=False)

    def print_error(self, message: str):
        self.err_console.print(f"[bold red]❌ ERROR:[/] {escape(message)}", soft_wrap=True, emoji=False)

    def print_warning(self, message: str):
        self.err_console.print(f"[bold yellow]⚠️ WARNING:[/] {escape(message)}", soft_wrap=True, emoji=False)

    def report_failure(self, operation_name: str, result: FsResult):
        """Show a failed FsResult the same way wherever it came from"""
        if result.error is FsErrorKind.CANCELLED:
            self.print_warning(result.message)
        else:
            self.print_error(f"{operation_name} - {result.message}")

    def print_separator(self):
        self.console.print("─" * 60)

    def print_section_break(self):
        self.console.print("═" * 60)

    def print_section_header(self, title: str):
        self.console.print()
        self.console.print(Panel(title, style="bold green"))
        self.print_separator()


# =============================================================================
# MAIN APPLICATION - Main menu loop and directory sessions
# =============================================================================


class FileCommander:
    """
    Main application class driving the interactive menus.

    The main menu dispatches between opening a directory session, creating a
    directory and exiting. A directory session holds the opened path and
    dispatches the sub-menu operations against it. By default one operation
    runs per session; with loop_session the sub-menu repeats until the user
    returns to the main menu.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        input_stream: Optional[TextIO] = None,
        loop_session: bool = False,
    ):
        self.ui = UIUtils(console, err_console, input_stream)
        self.loop_session = loop_session

        self.main_actions: Dict[int, Callable[[], object]] = {
            MainChoice.OPEN_DIRECTORY: self.open_directory,
            MainChoice.CREATE_DIRECTORY: self.create_directory_menu,
        }
        self.session_actions: Dict[int, Callable[[DirectorySession], object]] = {
            SessionChoice.LIST: lambda session: self.display_directory_contents(session.path),
            SessionChoice.LIST_RECURSIVE: lambda session: self.display_directory_contents(
                session.path, recursive=True
            ),
            SessionChoice.COPY: lambda session: self.transfer_file(session, TransferAction.COPY),
            SessionChoice.MOVE: lambda session: self.transfer_file(session, TransferAction.MOVE),
            SessionChoice.TRANSFER: self.transfer_file,
            SessionChoice.VIEW: self.view_file,
        }

    # -------------------------------------------------------------------------
    # Main menu
    # -------------------------------------------------------------------------

    def show_main_menu(self):
        self.ui.console.print()
        header = Text(f"🗂️ {APP_NAME}", style="bold blue")
        self.ui.console.print(Panel(header, subtitle="Main Menu", style="cyan"))
        self.ui.show_menu("🎯 Choose an Operation", MAIN_MENU_OPTIONS)

    def run_interactive(self):
        """
        Main interactive loop.

        Only the exit choice, Ctrl+C or the end of input leave the loop. Bad
        input and failed operations are reported and the menu comes back.
        """
        while True:
            try:
                self.show_main_menu()
                choice = self.ui.ask_menu_choice()

                if choice == MainChoice.EXIT:
                    self.ui.print_section_break()
                    self.ui.console.print(f"[bold yellow]👋 {GOODBYE_MESSAGE}[/]", emoji=False)
                    self.ui.print_section_break()
                    break

                action = self.main_actions.get(choice)
                if action is None:
                    self.ui.print_error(INVALID_CHOICE_MESSAGE)
                    continue
                action()

            except (KeyboardInterrupt, EOFError):
                self.ui.print_section_break()
                self.ui.console.print("[bold yellow]👋 Input closed.[/] Leaving Directory Commander", emoji=False)
                self.ui.print_section_break()
                break
            except Exception as e:
                logger.exception("Unexpected error in main menu")
                self.ui.print_section_break()
                self.ui.print_error(f"Unexpected error: {e}")
                self.ui.print_section_break()

    def _ask_path(self, prompt: str) -> Optional[Path]:
        """Prompt for a path, normalize it and reject anything off the whitelist."""
        raw = self.ui.ask_text(prompt)
        normalized = PathUtils.normalize_path(raw)
        if not PathUtils.is_valid_path(normalized):
            self.ui.print_error(f"Invalid path: '{raw}'. Avoid empty paths and the characters <>:\"|?*")
            return None
        return Path(normalized)

    def _ask_filename(self, prompt: str) -> Optional[str]:
        raw = self.ui.ask_text(prompt)
        filename = PathUtils.normalize_path(raw)
        if not PathUtils.is_valid_path(filename):
            self.ui.print_error(f"Invalid file name: '{raw}'")
            return None
        return filename

    # -------------------------------------------------------------------------
    # Create directory
    # -------------------------------------------------------------------------

    def create_directory_menu(self) -> Optional[FsResult]:
        self.ui.print_section_header("📁 Create Directory")

        parent = self._ask_path("Enter the full path of the parent directory")
        if parent is None:
            return None
        name = self._ask_filename("Enter the name of the new directory")
        if name is None:
            return None

        return self.create_directory(PathUtils.join_path(parent, name))

    def create_directory(self, path: Path) -> FsResult:
        """Create path and any missing parents; an existing path is left untouched."""
        result = FileSystem.create_directories(path)
        if result.ok:
            self.ui.print_success(f"Directory created successfully: {path}")
        else:
            self.ui.report_failure("Creating directory", result)
        return result

    # -------------------------------------------------------------------------
    # Directory session
    # -------------------------------------------------------------------------

    def open_directory(self):
        self.ui.print_section_header("📂 Open Directory")

        path = self._ask_path("Enter the full path of the directory to open")
        if path is None:
            return
        if not FileSystem.is_directory(path):
            self.ui.print_error(f"Invalid directory path: {path}")
            return

        self.run_session(DirectorySession(path))

    def show_session_menu(self, session: DirectorySession):
        self.ui.print_info(f"Current directory: {session.path}")
        self.ui.show_menu("📂 Directory Operations", SESSION_MENU_OPTIONS)

    def run_session(self, session: DirectorySession):
        while True:
            self.show_session_menu(session)
            choice = self.ui.ask_menu_choice()

            if choice == SessionChoice.RETURN:
                return

            action = self.session_actions.get(choice)
            if action is None:
                self.ui.print_error(INVALID_CHOICE_MESSAGE if not self.loop_session else "Invalid choice.")
            else:
                action(session)

            if not self.loop_session:
                return

    # -------------------------------------------------------------------------
    # Listing
    # -------------------------------------------------------------------------

    def display_directory_contents(self, path: Path, recursive: bool = False) -> int:
        """
        Print every entry path of a directory, one per line.

        Entries come out in whatever order the filesystem yields them.
        Failures are reported inline and the listing continues. Returns the
        number of entries printed.
        """
        if not FileSystem.is_directory(path):
            self.ui.print_error(f"Invalid directory path: {path}")
            return 0

        entries = FileSystem.list_entries_recursive(path) if recursive else FileSystem.list_entries(path)
        shown = 0
        failed = False

        for result in entries:
            if result.ok:
                self.ui.print_line(str(result.value))
                shown += 1
            else:
                failed = True
                self.ui.report_failure("Listing directory", result)

        if shown == 0 and not failed:
            self.ui.print_warning(f"Directory is empty: {path}")
        return shown

    # -------------------------------------------------------------------------
    # Copy / move
    # -------------------------------------------------------------------------

    def transfer_file(
        self, session: DirectorySession, action: Optional[TransferAction] = None
    ) -> Optional[FsResult]:
        """
        Gather a transfer request from the user and carry it out.

        With no preset action the user types 'Copy' or 'Move'; any other token
        sends the flow back to the file-name prompt.
        """
        while True:
            filename = self._ask_filename("Enter the name of the file (e.g., example.txt)")
            if filename is None:
                return None
            destination = self._ask_path("Enter the full path of the destination directory")
            if destination is None:
                return None

            chosen = action
            if chosen is None:
                token = self.ui.ask_text("Enter the action (Copy or Move)")
                chosen = TransferAction.parse(token)
                if chosen is None:
                    self.ui.print_error(f"Unrecognized action '{token}'. Type exactly Copy or Move.")
                    continue
            break

        return self.execute_transfer(TransferRequest(session.path, filename, destination, chosen))

    def _abort(self, error: FsErrorKind, message: str) -> FsResult:
        result = FsResult.failure(error, message)
        self.ui.report_failure("Transfer", result)
        return result

    def execute_transfer(self, request: TransferRequest) -> FsResult:
        done = request.action.past_tense
        source = request.source
        destination_dir = request.destination_dir

        if not FileSystem.is_regular_file(source):
            return self._abort(
                FsErrorKind.NOT_FOUND,
                f"Source file does not exist or is not a regular file. Checked path: {source}",
            )

        if not FileSystem.exists(destination_dir):
            if not self.ui.confirm(f"Destination directory {escape(str(destination_dir))} does not exist. Create it?"):
                return self._abort(FsErrorKind.CANCELLED, f"Operation cancelled. Nothing was {done}.")
            created = self.create_directory(destination_dir)
            if not created.ok:
                return created
        elif not FileSystem.is_directory(destination_dir):
            return self._abort(
                FsErrorKind.NOT_A_DIRECTORY,
                f"Destination path is not a directory. Checked path: {destination_dir}",
            )

        destination = request.destination
        if FileSystem.is_same_file(source, destination):
            return self._abort(
                FsErrorKind.SAME_FILE, f"Source and destination are the same file: {source}"
            )

        overwrite = False
        if FileSystem.exists(destination):
            if FileSystem.is_directory(destination):
                return self._abort(
                    FsErrorKind.NOT_A_FILE, f"A directory already exists at: {destination}"
                )
            if not self.ui.confirm(f"File {escape(str(destination))} already exists. Overwrite?"):
                return self._abort(FsErrorKind.CANCELLED, f"Operation cancelled. Nothing was {done}.")
            overwrite = True

        if request.action is TransferAction.COPY:
            result = FileSystem.copy_file(source, destination, overwrite=overwrite)
        else:
            result = FileSystem.move_file(source, destination, overwrite=overwrite)

        if result.ok:
            self.ui.print_success(f"File {done} successfully to: {destination}")
        else:
            self.ui.report_failure(f"{request.action.value} failed", result)
        return result

    # -------------------------------------------------------------------------
    # View
    # -------------------------------------------------------------------------

    def view_file(self, session: DirectorySession) -> Optional[FsResult]:
        filename = self._ask_filename("Enter the name of the file to view (e.g., example.txt)")
        if filename is None:
            return None
        return self.display_file(PathUtils.join_path(session.path, filename))

    def display_file(self, path: Path) -> FsResult:
        """Print a text file line by line; the success value is the number of lines."""
        if not FileSystem.exists(path):
            return self._report(FsErrorKind.NOT_FOUND, f"File does not exist. Checked path: {path}")
        if not FileSystem.is_regular_file(path):
            return self._report(FsErrorKind.NOT_A_FILE, f"Path is not a regular file. Checked path: {path}")

        opened = FileSystem.open_for_read(path)
        if not opened.ok:
            self.ui.report_failure("Could not open file", opened)
            return opened

        self.ui.print_info(f"Contents of {path}:")
        count = 0
        with opened.value as handle:
            for result in FileSystem.iter_lines(handle, path):
                if not result.ok:
                    self.ui.report_failure("Reading file", result)
                    return result
                self.ui.print_line(result.value)
                count += 1

        return FsResult.success(count)

    def _report(self, error: FsErrorKind, message: str) -> FsResult:
        self.ui.print_error(message)
        return FsResult.failure(error, message)


# =============================================================================
# APPLICATION ENTRY POINTS
# =============================================================================


def configure_logging(
    verbose: bool = False,
    log_file: Optional[Path] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Route the dir_commander logger to stderr through rich, plus an optional file.

    The stderr handler only shows warnings unless verbose is set; the file
    handler always records everything from DEBUG up.
    """
    logger.handlers.clear()
    logger.propagate = False

    rich_handler = RichHandler(
        console=console or Console(stderr=True), show_path=False, rich_tracebacks=True
    )
    rich_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.addHandler(rich_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    logger.setLevel(logging.DEBUG if verbose or log_file is not None else logging.WARNING)


@app.command()
def interactive(
    stay_in_directory: bool = typer.Option(
        False,
        "--stay-in-directory",
        help="Keep the directory menu open after each operation.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log filesystem operations to stderr."
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Also write the operation log to this file."
    ),
):
    """Start interactive mode - the main way to use Directory Commander.

    No arguments are needed: every option here is optional.
    """
    err_console = Console(stderr=True)
    configure_logging(verbose=verbose, log_file=log_file, console=err_console)
    commander = FileCommander(console=Console(), err_console=err_console, loop_session=stay_in_directory)
    commander.run_interactive()


def main():
    app()


if __name__ == "__main__":
    main()
