import asyncio

from flagpoll import FlagClient, ViewerClient, AioHTTPTransport


async def main():
    transport = AioHTTPTransport(base_url="http://localhost:8080")
    viewer = ViewerClient(FlagClient(transport))

    try:
        await viewer.start()
        await asyncio.sleep(30)
    finally:
        await viewer.stop()
        await viewer.poller.wait_inflight()
        await transport.close()


if __name__ == "__main__":
    asyncio.run(main())
