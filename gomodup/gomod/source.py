"""Go module dependency source backed by the ``go`` command line tool."""

import json
import logging
import subprocess
from typing import Any, Iterator, List, Optional, Tuple

from gomodup.core.exceptions import CommandError, ModuleDataError
from gomodup.core.models import Module, updatable_modules


_DECODER = json.JSONDecoder()


def iter_json_values(text: str) -> Iterator[Any]:
    """
    Decode a stream of concatenated JSON values.

    ``go list -json`` writes one indented object after another rather than a
    single array, so values are decoded one at a time.

    Raises:
        ModuleDataError: If a value cannot be decoded
    """
    index = 0
    length = len(text)
    while True:
        while index < length and text[index].isspace():
            index += 1
        if index >= length:
            return
        try:
            value, index = _DECODER.raw_decode(text, index)
        except json.JSONDecodeError as e:
            raise ModuleDataError(f"Malformed module listing: {e}") from e
        yield value


def parse_module_listing(text: str) -> Tuple[Module, ...]:
    """Parse ``go list -m -u -json all`` output into the ordered update list."""
    return updatable_modules(Module.from_record(record) for record in iter_json_values(text))


class GoModuleSource:
    """Lists and updates the dependencies of a Go module."""

    def __init__(self, go_binary: str = "go", workdir: Optional[str] = None,
                 logger: Optional[logging.Logger] = None):
        self.go_binary = go_binary
        self.workdir = workdir
        self.logger = logger or logging.getLogger(__name__)

    def list_command(self) -> List[str]:
        return [self.go_binary, "list", "-m", "-u", "-json", "all"]

    def update_command(self, module: Module) -> List[str]:
        return [self.go_binary, "get", "-u", module.target]

    def load(self) -> Tuple[Module, ...]:
        """
        List modules that have a pending update.

        Standard error of the go process is passed through to the terminal.

        Returns:
            Direct modules then indirect modules, each sorted by path

        Raises:
            CommandError: If go cannot be started or exits non-zero
            ModuleDataError: If the listing is malformed
        """
        args = self.list_command()
        self.logger.debug(f"Running: {' '.join(args)}")
        try:
            result = subprocess.run(
                args,
                cwd=self.workdir,
                stdout=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as e:
            self.logger.error(f"Failed to start {args[0]}: {e}")
            raise CommandError(f"Failed to run {' '.join(args)}: {e}", args) from e
        except UnicodeDecodeError as e:
            self.logger.error(f"{' '.join(args)} produced undecodable output: {e}")
            raise ModuleDataError(f"Malformed module listing: {e}") from e

        if result.returncode != 0:
            self.logger.error(f"{' '.join(args)} exited with status {result.returncode}")
            raise CommandError(
                f"{' '.join(args)} exited with status {result.returncode}",
                args,
                result.returncode,
            )

        modules = parse_module_listing(result.stdout)
        self.logger.info(f"Found {len(modules)} modules with available updates")
        return modules

    def apply_update(self, module: Module) -> Tuple[Module, ...]:
        """
        Update a single module to its available version and reload the list.

        Raises:
            ModuleDataError: If the module has no update
            CommandError: If go get fails or the reload fails
        """
        args = self.update_command(module)
        self.logger.info(f"Updating {module.path} {module.version} -> {module.update.version}")
        try:
            returncode = subprocess.call(
                args,
                cwd=self.workdir,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            self.logger.error(f"Failed to start {args[0]}: {e}")
            raise CommandError(f"Failed to run {' '.join(args)}: {e}", args) from e

        if returncode != 0:
            self.logger.error(f"{' '.join(args)} exited with status {returncode}")
            raise CommandError(f"{' '.join(args)} exited with status {returncode}", args, returncode)

        return self.load()
