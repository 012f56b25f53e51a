"""
Orchestrator - sequences the startup checks, file selection and dotenvx run
for one action and maps the outcome to a process exit code.
"""
from typing import Optional, Sequence

from core.config import Config
from core.env import discovery, dispatcher, prober, runner, selector
from core.env.dispatcher import Action
from core.errors import (
    CommandFailed,
    DotenvxInteractiveError,
    OperationCancelled,
    PrerequisiteMissing,
)
from core.utils import console
from core.utils.cancel import CancellationToken
from core.utils.logger import get_logger

logger = get_logger()

EXIT_OK = 0
EXIT_FAILURE = 1

PAST_TENSE = {
    Action.ENCRYPT: "encrypted",
    Action.DECRYPT: "decrypted",
}
NOUNS = {
    Action.ENCRYPT: "encryption",
    Action.DECRYPT: "decryption",
}
FAILURE_LABELS = {
    Action.ENCRYPT: "encrypting files",
    Action.DECRYPT: "decrypting files",
    Action.PRECOMMIT: "installing precommit hook",
}


class Orchestrator:
    """
    Runs a single action to completion.

    Collaborators default to the real implementations and can be replaced
    for testing.
    """

    def __init__(
        self,
        config=Config,
        token: Optional[CancellationToken] = None,
        probe=None,
        discover=None,
        select_files=None,
        select_action=None,
        run=None,
    ):
        self.config = config
        self.token = token or CancellationToken()
        self.probe = probe or prober.probe
        self.discover = discover or discovery.discover
        self.select_files = select_files or selector.select_files
        self.select_action = select_action or selector.select_action
        self.run_command = run or runner.run

    def check_prerequisites(self):
        """
        Raises:
            PrerequisiteMissing: For the first missing prerequisite, after
            every remediation has been printed.
        """
        prerequisites = self.probe(self.config)
        missing = []
        if not prerequisites.dotenvx_available:
            console.error("dotenvx is not installed on your system.")
            console.warning(f"Please install it using: {self.config.INSTALL_HINT}")
            missing.append(PrerequisiteMissing("dotenvx not installed", self.config.INSTALL_HINT))
        if not prerequisites.keys_file_present:
            keys_file = self.config.KEYS_FILE
            console.warning(f"No {keys_file} file found. Please create one to proceed.")
            missing.append(PrerequisiteMissing(f"{keys_file} file not found", f"Create {keys_file}"))
        if missing:
            raise missing[0]
        console.success("dotenvx is installed")
        return prerequisites

    def run(self, action: Action, files: Optional[Sequence[str]] = None) -> int:
        """
        Execute ``action`` and return the process exit code.

        Args:
            action (Action): What to do. ``Action.MENU`` asks the operator.
            files (Optional[Sequence[str]]): Explicit files for encrypt or
                decrypt, forwarded verbatim without prompting.
        """
        try:
            self.check_prerequisites()
            if action is Action.MENU:
                console.console.print()
                action = self.select_action(token=self.token)
            return self._perform(action, files)
        except PrerequisiteMissing as e:
            logger.debug("Blocked: %s", e)
            return EXIT_FAILURE
        except OperationCancelled as e:
            logger.debug("Cancelled: %s", e)
            console.farewell()
            return EXIT_OK
        except CommandFailed as e:
            console.error(f"Error {FAILURE_LABELS[e.action]}: {e}")
            return EXIT_FAILURE
        except DotenvxInteractiveError as e:
            console.error(str(e))
            return e.exit_code
        except Exception as e:
            logger.debug("Unexpected failure", exc_info=True)
            console.error(f"An error occurred: {e}")
            return EXIT_FAILURE

    def _perform(self, action: Action, files: Optional[Sequence[str]]) -> int:
        if action is Action.EXIT:
            console.farewell()
            return EXIT_OK

        if action is Action.PRECOMMIT:
            self._dispatch(action, ())
            console.success("Precommit hook installed successfully")
            return EXIT_OK

        if not action.takes_files:
            raise ValueError(f"Unsupported action: {action.value}")

        candidates = self.discover(self.config.WORK_DIR, self.config)
        if not candidates:
            console.warning("No .env files found in the current directory.")
            return EXIT_OK

        if files:
            selected = list(files)
        else:
            selected = self.select_files(candidates, action.value, token=self.token)
        if not selected:
            console.warning(f"No files selected for {NOUNS[action]}")
            return EXIT_OK

        console.info(f"Running dotenvx {action.value} on: {', '.join(selected)}")
        self._dispatch(action, selected)
        console.success(f"Files {PAST_TENSE[action]} successfully")
        return EXIT_OK

    def _dispatch(self, action: Action, files: Sequence[str]):
        self.token.raise_if_cancelled()
        return dispatcher.dispatch(
            action, files, run=self.run_command, config=self.config, token=self.token
        )
