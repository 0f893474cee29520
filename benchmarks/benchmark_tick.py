import time

import numpy as np

from cosmicvelocity.bodies import Meteoroid
from cosmicvelocity.controls import ScriptedInput
from cosmicvelocity.simulation import GameController, Mode


def crowded_game(count, seed=0):
    rng = np.random.default_rng(seed)
    controls = ScriptedInput([(True, False)])
    game = GameController(controls, rng=rng)
    game.tick()
    # park meteoroids far from the attractor so the run is not cut short
    for _ in range(count):
        x = rng.choice([20.0, 620.0])
        y = rng.uniform(20.0, 460.0)
        game.state.meteoroids.append(Meteoroid(pos=[x, y], vel=[0.0, 0.0]))
    return game


def run_ticks(game, limit):
    """Tick until ``limit`` or game over; returns the number of ticks run."""
    done = 0
    while done < limit and game.mode is Mode.PLAYING:
        game.tick()
        done += 1
    return done


if __name__ == "__main__":
    for count in (10, 100, 500):
        game = crowded_game(count)
        t0 = time.time()
        ticks = run_ticks(game, 600)
        t1 = time.time()
        per_tick = (t1 - t0) / ticks * 1000 if ticks else 0.0
        print(f"{count:4d} meteoroids: {per_tick:.3f} ms/tick over {ticks} ticks "
              f"(budget {1000 / 60:.1f} ms)")
