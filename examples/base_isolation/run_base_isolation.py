"""
Minimal example: fixed-base vs. base-isolated building under sinusoidal shaking.

Runs the simulation headless (frame-driven ticker), prints peak offsets and
the natural frequency, optionally plots the response.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add repository root to path
ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

from quakeguard.core import BaseIsolationSimulation, SimulationHistory
from quakeguard.io import load_parameters, save_parameters
from quakeguard.physics import SimulationParameters
from quakeguard.simulation import ManualTicker


def main() -> None:
    parser = argparse.ArgumentParser(description="Base isolation demo")
    parser.add_argument("--config", type=Path, default=None, help="JSON parameters file")
    parser.add_argument("--save-config", type=Path, default=None, help="write parameters used")
    parser.add_argument("--frequency", type=float, default=None, help="earthquake frequency (Hz)")
    parser.add_argument("--stiffness", type=float, default=None, help="isolator stiffness k")
    parser.add_argument("--damping", type=float, default=None, help="isolator damping b")
    parser.add_argument("--seconds", type=float, default=10.0, help="simulated duration")
    parser.add_argument("--plot", action="store_true", help="plot offsets (needs matplotlib)")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    params = load_parameters(args.config) if args.config else SimulationParameters()
    changes = {
        "earthquake_frequency": args.frequency,
        "isolator_stiffness": args.stiffness,
        "isolator_damping": args.damping,
    }
    params = params.with_changes(clamp=True, **{k: v for k, v in changes.items() if v is not None})
    if args.save_config:
        save_parameters(params, args.save_config)

    tickers = []

    def make_ticker(interval, callback):
        ticker = ManualTicker(interval, callback)
        tickers.append(ticker)
        return ticker

    history = SimulationHistory()
    sim = BaseIsolationSimulation(parameters=params, ticker_factory=make_ticker, history=history)

    sim.start()
    n_frames = int(round(args.seconds / params.time_step))
    tickers[-1].fire(n_frames)

    print(f"Natural frequency: {sim.natural_frequency():.2f} Hz "
          f"(earthquake: {params.earthquake_frequency:.1f} Hz, "
          f"ratio {sim.engine.frequency_ratio():.2f})")
    print(f"Peak fixed-base offset:    {history.peak('ground_offset'):.2f}")
    print(f"Peak base-isolated offset: {history.peak('building_offset'):.2f}")

    if args.plot:
        import matplotlib.pyplot as plt
        from quakeguard.simulation import plot_offsets_vs_time

        plot_offsets_vs_time(history)
        plt.tight_layout()
        plt.show()

    sim.stop()


if __name__ == "__main__":
    main()
