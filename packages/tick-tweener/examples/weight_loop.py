"""Weight loop -- tween a font weight on a real-time asyncio clock.

Demonstrates:
- Driving a Tweener from AsyncioScheduler at 60 fps
- Retargeting mid-run (the "hover" case): the old run is cancelled
- Awaiting runs one after another
- Sequencing with chain()

Run: python -m examples.weight_loop
"""

import asyncio
from concurrent.futures import Future

from tick_tweener import AsyncioScheduler, Tweener, TweenerConfig, chain


def show(value: float, progress: float) -> None:
    print(f"  weight {round(value):>3}  |  {round(progress * 100):>3}%")


async def wait(future: Future[None]) -> None:
    await asyncio.wrap_future(future)


async def main() -> None:
    tweener = Tweener(
        TweenerConfig(
            duration=300,
            easing="ease-in-out-cubic",
            on_update=show,
            on_complete=lambda value: print(f"  done at {value:g}"),
        ),
        AsyncioScheduler(fps=60),
    )
    tweener.current_value = 100

    print("=== Hover: 100 -> 800, released halfway ===\n")
    hover = tweener.animate_to(800)
    await asyncio.sleep(0.15)
    release = tweener.animate_to(100)
    print(f"  hover run cancelled: {hover.cancelled()}")
    await wait(release)

    print("\n=== Loop ===\n")
    for target in (900, 300, 700, 400):
        await wait(tweener.animate_to(target))

    print("\n=== chain() ===\n")
    tweener.set_easing([0.25, 0.1, 0.25, 1.0])
    tweener.set_duration(200)
    await wait(chain([(tweener, 100), (tweener, 900), (tweener, 400)]))

    print(f"\nFinal weight: {tweener.current_value:g}")


if __name__ == "__main__":
    asyncio.run(main())
