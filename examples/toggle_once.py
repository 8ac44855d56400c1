import asyncio

from flagpoll import AdminClient, FlagClient, AioHTTPTransport


async def main():
    transport = AioHTTPTransport(base_url="http://localhost:8080")
    admin = AdminClient(FlagClient(transport))

    try:
        await admin.poller.poll_once()
        print(admin.render())
        if await admin.toggle():
            print(admin.render())
    finally:
        await transport.close()


if __name__ == "__main__":
    asyncio.run(main())
