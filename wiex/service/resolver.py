from wiex.errors import CommandNotFoundError
from wiex.infra.cli_path import lookup_argv
from wiex.infra.process import run_quiet


class Resolver:
    def __init__(self, logger, lookup_tool: str | None = None):
        self.logger = logger
        self.lookup_tool = lookup_tool

    async def ensure_exists(self, command: str):
        # checked against the unmodified host environment, not the augmented PATH
        argv = lookup_argv(command, self.lookup_tool)
        code = None
        if argv is not None:
            try:
                code = await run_quiet(argv)
            except OSError:
                code = None

        # a negative status means the lookup was killed by a signal
        if code is None or code != 0:
            message = f"Error: {command} not found"
            self.logger.error(message)
            raise CommandNotFoundError(
                code="command.not_found",
                message=message,
                data={"command": command, "lookup_status": code},
            )
