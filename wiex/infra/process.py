import asyncio
from collections.abc import Mapping, Sequence

CHUNK_SIZE = 64 * 1024


async def spawn_child(command: str, args: Sequence[str], env: Mapping[str, str]) -> asyncio.subprocess.Process:
    return await asyncio.create_subprocess_exec(
        command,
        *args,
        env=dict(env),
        stdin=None,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )


async def run_quiet(argv: Sequence[str]) -> int | None:
    """Run argv with output discarded and return its exit status."""
    proc = await asyncio.create_subprocess_exec(
        *argv,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.DEVNULL,
        stderr=asyncio.subprocess.DEVNULL,
    )
    return await proc.wait()


def _sink_write(sink, data: bytes):
    # text streams such as sys.stdout expose their byte layer as .buffer
    target = getattr(sink, "buffer", sink)
    target.write(data)
    flush = getattr(target, "flush", None)
    if flush is not None:
        flush()


async def relay(reader: asyncio.StreamReader | None, sink) -> int:
    """Forward bytes from reader to sink as they arrive, returns the byte count.

    When the sink fails the rest of the stream is still read and dropped, so the
    child never blocks on a full pipe; the sink error is raised at EOF.
    """
    if reader is None:
        return 0
    total = 0
    error = None
    while True:
        chunk = await reader.read(CHUNK_SIZE)
        if not chunk:
            if error is not None:
                raise error
            return total
        if error is not None:
            continue
        try:
            _sink_write(sink, chunk)
        except (OSError, ValueError, TypeError) as e:
            error = e
            continue
        total += len(chunk)
