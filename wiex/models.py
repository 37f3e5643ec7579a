from dataclasses import dataclass


@dataclass(frozen=True)
class InvocationRequest:
    command: str
    command_args: tuple = ()


@dataclass(frozen=True)
class InvocationOptions:
    strict: bool = False
    verbose: bool = False


@dataclass(frozen=True)
class ExitedWithCode:
    code: int


@dataclass(frozen=True)
class ExitedWithUnknownCode:
    pass


@dataclass(frozen=True)
class Disconnected:
    pass


TerminationOutcome = ExitedWithCode | ExitedWithUnknownCode | Disconnected


@dataclass(frozen=True)
class InvocationResult:
    pid: int | None
    outcome: TerminationOutcome

    @property
    def exit_code(self) -> int | None:
        # None leaves the host exit status at its default
        if isinstance(self.outcome, ExitedWithCode):
            return self.outcome.code
        return None
