"""Basic Result/Option example.

Demonstrates the sync helpers, the capture boundary and the async bridge.
No setup required.

Usage:
    python examples/basic_usage.py
"""

import asyncio

from src.results import o, r


def parse_port(raw: str) -> r.Result[int, str]:
    if not raw.isdigit():
        return r.Err(f"not a number: {raw!r}")
    port = int(raw)
    if not 0 < port < 65536:
        return r.Err(f"out of range: {port}")
    return r.Ok(port)


async def fetch_banner(port: int) -> str:
    await asyncio.sleep(0.01)
    if port == 8080:
        raise ConnectionError(f"connection refused on {port}")
    return f"service on {port}"


async def main() -> None:
    # 1. Constructing and inspecting results
    for raw in ("443", "http", "70000"):
        result = parse_port(raw)
        if r.is_ok(result):
            print(f"{raw!r} -> port {result.value}")
        else:
            print(f"{raw!r} -> error: {result.error}")

    # 2. Chaining steps, stopping at the first error
    doubled = r.map(parse_port("80")).into(lambda p: r.Ok(p * 2)).get()
    print(f"chained: {doubled}")

    # 3. Raising inside, Result outside
    captured = r.capture(lambda: r.unwrap(parse_port("abc")) + 1)
    print(f"captured: {captured}")

    # 4. Awaitables become results
    for port in (443, 8080):
        print(f"banner {port}: {await r.to(fetch_banner(port))}")

    # 5. Promise-style pipeline, logging failures while verbose
    with r.use_config(verbose=True):
        result = await r.then(
            r.Ok("8080"),
            r.next(parse_port),
            r.next(lambda p: r.to(fetch_banner(p)), "banner unavailable"),
        )
    print(f"pipeline: {result}")

    # 6. Options
    env = {"HOME": "/root"}
    print(f"shell: {o.unwrap_or(o.from_optional(env.get('SHELL')), '/bin/sh')}")


if __name__ == "__main__":
    asyncio.run(main())
