"""
Simple CLI with async transforms and an async handler.

    python examples/greeter.py World --shout
    python examples/greeter.py --greeting Howdy -vv Partner
"""
import asyncio

from clargs import Cli, ParseResult, Transforms, opt, pos
from clargs.utils import setup_logging


async def load_greeting(values: dict) -> dict:
    await asyncio.sleep(0)
    return {**values, "greeting": values["greeting"] or "Hello"}


async def greet(result: ParseResult) -> None:
    message = f"{result.values['greeting']}, {result.positionals[0]}!"
    if result.values["shout"]:
        message = message.upper()
    print(message)
    if result.values["verbose"]:
        print(f"(verbosity {result.values['verbose']})")


cli = Cli(
    "greeter",
    version="1.0.0",
    description="Greets people",
    options=opt.options(
        greeting=opt.string(aliases=["g"], description="Greeting to use"),
        shout=opt.boolean(aliases=["s"], default=False, description="Shout it"),
        verbose=opt.count(aliases=["v"], description="Verbosity"),
    ),
    positionals=pos.positionals(pos.string(name="name", default="World")),
    transforms=Transforms(values=load_greeting),
    handler=greet,
)

if __name__ == "__main__":
    setup_logging()
    asyncio.run(cli.run_async())
