"""Example demonstrating the three calling styles of jsonrequest against httpbin.org."""

import asyncio
import logging
import os
import threading

import jsonrequest
from jsonrequest import Failure, JSONRequest, JSONRequestConfig, JSONRequestError, Success


def blocking_calls(config: JSONRequestConfig) -> None:
    """Synchronous verbs return data or raise."""
    print("1. Blocking GET with query parameters...")
    request = JSONRequest(config)
    data = request.get("https://httpbin.org/get", query_params={"hello": "world"})
    print(f"   args: {data['args']}")
    print(f"   status: {request.http_response.status_code}")

    print("\n2. Blocking POST through the module-level helper...")
    data = jsonrequest.post("https://httpbin.org/post", payload={"hi": "there"}, config=config)
    print(f"   echoed json: {data['json']}")

    print("\n3. Failing request...")
    try:
        jsonrequest.get("httpppp://httpbin.org/get", config=config)
    except JSONRequestError as exc:
        print(f"   ✗ {exc.kind.value}: {exc}")


def callback_call(config: JSONRequestConfig) -> None:
    """Callback verbs deliver a Success or Failure exactly once."""
    print("\n4. Callback PUT...")
    done = threading.Event()

    def complete(result) -> None:
        if isinstance(result, Success):
            print(f"   ✓ {result.response.status_code}: {result.dictionary_value.get('json')}")
        elif isinstance(result, Failure):
            print(f"   ✗ {result.kind.value} (body: {result.body!r})")
        done.set()

    jsonrequest.put_async("https://httpbin.org/put", payload={"id": 7}, complete=complete, config=config)
    done.wait()


async def awaitable_call(config: JSONRequestConfig) -> None:
    """Inside an event loop, await the result-returning form."""
    print("\n5. Awaited DELETE...")
    result = await JSONRequest(config).send("DELETE", "https://httpbin.org/delete", {"id": 7})
    print(f"   success: {result.error is None}, args: {result.dictionary_value.get('args')}")


def main() -> None:
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING"))
    trace = os.getenv("JSONREQUEST_TRACE") == "1"

    config = JSONRequestConfig.from_environment(
        user_agent="jsonrequest-example/0.1",
        log=print if trace else None,
    )

    print("=== jsonrequest httpbin example ===\n")
    blocking_calls(config)
    callback_call(config)
    asyncio.run(awaitable_call(config))


if __name__ == "__main__":
    main()
