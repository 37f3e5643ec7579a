import asyncio
import logging
from dataclasses import dataclass

from wiex.errors import AmbiguousTerminationError, RelayError, SpawnError
from wiex.infra.environment import EnvironmentContext, derive_environment
from wiex.infra.process import relay, spawn_child
from wiex.models import (
    Disconnected,
    ExitedWithCode,
    ExitedWithUnknownCode,
    InvocationOptions,
    InvocationRequest,
    InvocationResult,
)


@dataclass(frozen=True)
class SeverityPolicy:
    """How an exit without a code, or a disconnect, is reported."""

    level: int
    reject: bool

    @classmethod
    def for_options(cls, options: InvocationOptions) -> "SeverityPolicy":
        if options.strict:
            return cls(level=logging.ERROR, reject=True)
        return cls(level=logging.WARNING, reject=False)

    def apply(self, logger, message: str, outcome) -> AmbiguousTerminationError | None:
        logger.log(self.level, message)
        if not self.reject:
            return None
        return AmbiguousTerminationError(
            code="process.ambiguous_termination",
            message=message,
            data={"outcome": outcome},
        )


class Invoker:
    def __init__(self, logger, out_stream, err_stream, resolver=None, spawn=spawn_child, path_env: str = "WIEX_PATH"):
        self.logger = logger
        self.out_stream = out_stream
        self.err_stream = err_stream
        self.resolver = resolver
        self.spawn = spawn
        self.path_env = path_env

    async def invoke(
        self,
        request: InvocationRequest,
        options: InvocationOptions = InvocationOptions(),
        environment: EnvironmentContext | None = None,
    ) -> InvocationResult:
        policy = SeverityPolicy.for_options(options)

        if environment is None:
            environment = derive_environment(self.path_env)
        if not environment.search_path_extra:
            self.logger.warning(f"${self.path_env} is not set, so wiex not expand $PATH")

        # the lookup finishes before anything is spawned, so a missing
        # command never starts and never leaves a child behind
        if self.resolver is not None:
            await self.resolver.ensure_exists(request.command)

        try:
            proc = await self.spawn(request.command, list(request.command_args), environment.child_environment())
        except OSError as e:
            message = f"Error: failed to start {request.command}: {e}"
            self.logger.error(message)
            raise SpawnError(code="process.spawn_failed", message=message, data={"command": request.command}) from e

        pid = proc.pid
        # a failing sink must not stop the other relay or the wait below
        relays = asyncio.gather(
            relay(proc.stdout, self.out_stream),
            relay(proc.stderr, self.err_stream),
            return_exceptions=True,
        )
        try:
            outcome = await self._wait_terminal(proc)
        except BaseException:
            relays.cancel()
            raise

        error = None
        if isinstance(outcome, ExitedWithUnknownCode):
            error = policy.apply(self.logger, "exit code is unknown", outcome)
        elif isinstance(outcome, Disconnected):
            error = policy.apply(self.logger, f"process {pid} disconnected.", outcome)

        # close: both streams drained, the outcome is already fixed
        relayed = await relays
        if options.verbose:
            self.logger.info(f"process {pid} closed.")

        failures = [r for r in relayed if isinstance(r, BaseException)]
        if failures and error is None:
            message = f"Error: failed to relay output of process {pid}: {failures[0]!r}"
            self.logger.error(message)
            error = RelayError(code="process.relay_failed", message=message, data={"outcome": outcome})

        if error is not None:
            raise error
        return InvocationResult(pid=pid, outcome=outcome)

    async def _wait_terminal(self, proc):
        try:
            code = await proc.wait()
        except ChildProcessError:
            # asyncio reports a lost child as 255; only other process handles raise this
            return Disconnected()
        # signal deaths surface as a negative returncode and carry no exit code
        if code is None or code < 0:
            return ExitedWithUnknownCode()
        return ExitedWithCode(code)
