from wiex.config.config import AppConfig
from wiex.infra.environment import derive_environment
from wiex.models import InvocationOptions, InvocationRequest, InvocationResult
from wiex.service.invoker import Invoker
from wiex.service.resolver import Resolver


class Runner:
    def __init__(self, config: AppConfig, logger, out_stream, err_stream):
        self.config = config
        self.logger = logger

        self.resolver = Resolver(logger, lookup_tool=config.lookup_tool)
        self.invoker = Invoker(
            logger,
            out_stream,
            err_stream,
            resolver=self.resolver,
            path_env=config.path_env,
        )

    def options(self, strict: bool = False, verbose: bool = False) -> InvocationOptions:
        # flags can switch a configured default on, never off
        return InvocationOptions(
            strict=strict or self.config.strict,
            verbose=verbose or self.config.verbose,
        )

    async def run(self, request: InvocationRequest, options: InvocationOptions) -> InvocationResult:
        environment = derive_environment(
            self.config.path_env,
            dotenv_path=self.config.dotenv_path if self.config.dotenv else None,
        )
        return await self.invoker.invoke(request, options, environment)
