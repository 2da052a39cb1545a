"""Drive an attack technique through its warm-up, detonation, revert and clean-up."""

from __future__ import annotations

import asyncio
import logging
import os
import uuid
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Optional

from .technique import AttackTechnique, AttackTechniqueState

logger = logging.getLogger(__name__)

ENV_VAR_DETONATION_ID = "STRATUS_RED_TEAM_DETONATION_ID"

_MISSING_REGION_ERROR_MESSAGE = (
    'The argument "region" is required, but no definition was found'
)

_CANCELLATION_ERRORS = (KeyboardInterrupt, asyncio.CancelledError)


class RunnerError(Exception):
    """Raised when a technique cannot be moved to the requested state."""


class StateManager(ABC):
    """Persists the state and prerequisite outputs of one technique."""

    @abstractmethod
    def get_root_directory(self) -> str:
        """Return the directory under which technique files are kept."""

    @abstractmethod
    def extract_technique(self) -> None:
        """Write the technique's prerequisite code to disk."""

    @abstractmethod
    def cleanup_technique(self) -> None:
        """Remove the technique's files from disk."""

    @abstractmethod
    def get_technique_state(self) -> Optional[str]:
        """Return the persisted state, or None/empty when there is none."""

    @abstractmethod
    def set_technique_state(self, state: AttackTechniqueState) -> None:
        """Persist the technique state."""

    @abstractmethod
    def get_terraform_outputs(self) -> dict[str, str]:
        """Return the persisted prerequisite outputs."""

    @abstractmethod
    def write_terraform_outputs(self, outputs: Mapping[str, str]) -> None:
        """Persist the prerequisite outputs."""


class TerraformManager(ABC):
    """Creates and destroys the prerequisites of a technique."""

    @abstractmethod
    def terraform_init_and_apply(self, directory: str) -> dict[str, str]:
        """Create the prerequisites found in a directory and return their outputs."""

    @abstractmethod
    def terraform_destroy(self, directory: str) -> None:
        """Destroy the prerequisites found in a directory."""


def resolve_correlation_id(environ: Optional[Mapping[str, str]] = None) -> uuid.UUID:
    """Return the detonation ID from the environment, or a fresh random one."""
    if environ is None:
        environ = os.environ
    value = environ.get(ENV_VAR_DETONATION_ID, "")
    if not value:
        return uuid.uuid4()
    logger.info("%s is set, using it as the correlation ID", ENV_VAR_DETONATION_ID)
    try:
        return uuid.UUID(value)
    except ValueError as err:
        logger.info(
            "%s is not a valid UUID, falling back to a randomly-generated one: %s",
            ENV_VAR_DETONATION_ID,
            err,
        )
        return uuid.uuid4()


def error_message_from_terraform_error(error: BaseException) -> str:
    """Return a friendlier message for a prerequisite tooling error."""
    message = str(error)
    if _MISSING_REGION_ERROR_MESSAGE in message:
        return (
            "unable to create attack technique prerequisites. Ensure you are "
            "authenticated against AWS and have the right permissions to run "
            "Stratus Red Team.\n"
            "Stratus Red Team will display below the error that Terraform returned:\n"
            + message
        )
    return message


class Runner:
    """Moves one attack technique between the COLD, WARM and DETONATED states."""

    def __init__(
        self,
        technique: AttackTechnique,
        state_manager: StateManager,
        terraform_manager: TerraformManager,
        force: bool = False,
        correlation_id: Optional[uuid.UUID] = None,
        provider_factory: Any = None,
    ) -> None:
        self.technique = technique
        self.state_manager = state_manager
        self.terraform_manager = terraform_manager
        self.force = force
        self.correlation_id = correlation_id or resolve_correlation_id()
        self.provider_factory = provider_factory
        self.terraform_dir = os.path.join(state_manager.get_root_directory(), technique.id)
        persisted = state_manager.get_technique_state()
        self._state = (
            AttackTechniqueState(persisted) if persisted else AttackTechniqueState.COLD
        )

    @property
    def state(self) -> AttackTechniqueState:
        """The current state of the technique."""
        return self._state

    def unique_execution_id(self) -> str:
        """Return the ID unique to this runner."""
        return str(self.correlation_id)

    def warm_up(self) -> dict[str, str]:
        """Create the technique's prerequisites unless they already exist."""
        technique_id = self.technique.id
        if self.technique.prerequisites_terraform_code is None:
            return {}

        try:
            self.state_manager.extract_technique()
        except Exception as err:
            raise RunnerError("unable to extract Terraform file: " + str(err)) from err

        will_warm_up = True
        if self._state == AttackTechniqueState.WARM and not self.force:
            logger.info("Not warming up - %s is already warm. Use --force to force", technique_id)
            will_warm_up = False
        if self._state == AttackTechniqueState.DETONATED:
            logger.info(
                "%s has been detonated but not cleaned up, not warming up as it "
                "should be warm already.",
                technique_id,
            )
            will_warm_up = False

        if not will_warm_up:
            return self.state_manager.get_terraform_outputs()

        logger.info("Warming up %s", technique_id)
        try:
            outputs = self.terraform_manager.terraform_init_and_apply(self.terraform_dir)
        except BaseException as err:
            logger.info(
                "Error during warm up. Cleaning up technique prerequisites with terraform destroy"
            )
            try:
                self.terraform_manager.terraform_destroy(self.terraform_dir)
            except Exception:
                pass
            if isinstance(err, _CANCELLATION_ERRORS) or not isinstance(err, Exception):
                raise
            raise RunnerError(
                "unable to run terraform apply on prerequisite: "
                + error_message_from_terraform_error(err)
            ) from err

        write_error: Optional[Exception] = None
        try:
            self.state_manager.write_terraform_outputs(outputs)
        except Exception as err:
            write_error = err
        self._set_state(AttackTechniqueState.WARM)

        display = outputs.get("display")
        if display is not None:
            logger.info(display.replace("\\n", "\n"))

        if write_error is not None:
            raise write_error
        return outputs

    def detonate(self) -> None:
        """Warm up the technique if needed, then detonate it."""
        technique_id = self.technique.id
        will_warm_up = True

        if self._state == AttackTechniqueState.DETONATED:
            if not self.technique.is_idempotent and not self.force:
                raise RunnerError(
                    technique_id + " has already been detonated and is not idempotent. "
                    "Revert it with 'stratus revert' before detonating it again, or use --force"
                )
            will_warm_up = False

        if self.technique.is_slow:
            logger.info(
                "Note: This is a slow attack technique, it might take a long time "
                "to warm up or detonate"
            )

        if will_warm_up:
            outputs = self.warm_up()
        else:
            outputs = self.state_manager.get_terraform_outputs()

        if self.technique.detonate is None:
            raise RunnerError(
                "Error while detonating attack technique " + technique_id
                + ": no detonation function"
            )
        try:
            self.technique.detonate(outputs, self.provider_factory)
        except Exception as err:
            raise RunnerError(
                "Error while detonating attack technique " + technique_id + ": " + str(err)
            ) from err
        self._set_state(AttackTechniqueState.DETONATED)

    def revert(self) -> None:
        """Undo the side effects of a detonation."""
        technique_id = self.technique.id
        if self._state != AttackTechniqueState.DETONATED and not self.force:
            raise RunnerError(
                technique_id + " is not in DETONATED state and should not need to be "
                "reverted, use --force to force"
            )

        try:
            outputs = self.state_manager.get_terraform_outputs()
        except Exception as err:
            raise RunnerError(
                "unable to retrieve outputs of " + technique_id + ": " + str(err)
            ) from err

        logger.info("Reverting detonation of technique %s", technique_id)

        if self.technique.revert is not None:
            try:
                self.technique.revert(outputs, self.provider_factory)
            except Exception as err:
                raise RunnerError(
                    "unable to revert detonation of " + technique_id + ": " + str(err)
                ) from err

        self._set_state(AttackTechniqueState.WARM)

    def clean_up(self) -> None:
        """Revert a detonation if needed and destroy the prerequisites."""
        technique_id = self.technique.id
        if self._state == AttackTechniqueState.COLD and not self.force:
            raise RunnerError(
                technique_id + " is already COLD and should already be clean, "
                "use --force to force cleanup"
            )

        logger.info("Cleaning up %s", technique_id)

        if self.technique.revert is not None and self._state == AttackTechniqueState.DETONATED:
            try:
                self.revert()
            except RunnerError as err:
                if not self.force:
                    raise RunnerError(
                        "unable to revert detonation of " + technique_id
                        + " before cleaning up (use --force to cleanup anyway): " + str(err)
                    ) from err
                logger.warning(
                    "Warning: failed to revert detonation of %s. Ignoring and cleaning "
                    "up anyway as --force was used.",
                    technique_id,
                )

        if self.technique.prerequisites_terraform_code is not None:
            logger.info("Cleaning up technique prerequisites with terraform destroy")
            try:
                self.terraform_manager.terraform_destroy(self.terraform_dir)
            except _CANCELLATION_ERRORS:
                raise
            except Exception as err:
                raise RunnerError(
                    "unable to cleanup TTP prerequisites: "
                    + error_message_from_terraform_error(err)
                ) from err

        self._set_state(AttackTechniqueState.COLD)

        try:
            self.state_manager.cleanup_technique()
        except Exception as err:
            raise RunnerError(
                "unable to remove technique directory " + self.terraform_dir + ": " + str(err)
            ) from err

    def _set_state(self, state: AttackTechniqueState) -> None:
        try:
            self.state_manager.set_technique_state(state)
        except Exception as err:
            logger.warning("Warning: unable to set technique state: %s", err)
        self._state = state