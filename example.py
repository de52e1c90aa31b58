import asyncio
import random

import safexec
from safexec import ExecutionOptions


async def fetch_price(symbol: str) -> float:
    await asyncio.sleep(random.uniform(0.01, 0.2))
    if random.random() < 0.3:
        raise ConnectionError(f"quote service unavailable for {symbol}")
    return round(random.uniform(10, 500), 2)


async def main():
    safexec.configure(default_value=0.0)

    error, price = await safexec.execute(
        lambda: fetch_price("ACME"),
        ExecutionOptions(retries=2, retry_delay=0.05, timeout=0.5, logging=True, context={"symbol": "ACME"}),
    )
    print("ACME:", price if error is None else f"failed ({error})")

    symbols = ["ACME", "GLOBEX", "INITECH", "UMBRELLA"]
    results = await safexec.execute_batch(
        [lambda s=s: fetch_price(s) for s in symbols],
        {"retries": 1, "timeout": 0.15, "error_handler": None},
    )
    for symbol, (error, price) in zip(symbols, results):
        print(f"{symbol:>9}: {price:>7}  {safexec.status_of((error, price)).value}")


if __name__ == "__main__":
    asyncio.run(main())
