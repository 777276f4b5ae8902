"""
Show Keys Example - Printing Key Events

This example attaches to the interactive terminal and prints every decoded
key event. Press Ctrl+C to stop.

Set TERMKEYS_DEBUG=1 to also print the raw sequences as they arrive.
"""
import asyncio

from termkeys import Termkeys, TermkeysOptions, guess_terminal


async def main():
    keys = Termkeys(TermkeysOptions.from_env())
    done = asyncio.get_running_loop().create_future()

    print("Terminal:", guess_terminal())

    def on_key(event):
        # Raw mode: no automatic carriage return
        print(event.model_dump(by_alias=True), end="\r\n")
        if event.key == "SIGINT":
            keys.off("key", on_key)
            done.set_result(None)

    keys.on("key", on_key)
    keys.once("key", lambda event: print("ONCE", end="\r\n"))

    if not keys.attach():
        raise SystemExit("Need an interactive terminal on stdin.")

    try:
        await done
    finally:
        keys.detach()


if __name__ == "__main__":
    asyncio.run(main())
