#!/usr/bin/env python3
"""
Interactive board test script.

Connects to a board running the matching sketch, sends three integer
coordinate sets with a label, and prints whatever sets come back.
"""

import sys
import time
import logging
from pathlib import Path

# Add package to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from blendix import BlendixSerial, SerialLink

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)

def main():
    port = sys.argv[1] if len(sys.argv) > 1 else None

    codec = BlendixSerial()
    codec.set_tx_sets(3)
    codec.set_rx_sets(2)
    codec.set_coordinates(1, 1, 2, 3)
    codec.set_coordinates(2, 4, 5, 6)
    codec.set_coordinates(3, 7, 8, 9)
    codec.set_text("Hi")

    link = SerialLink(port=port)
    print(f"Connecting to {port or 'auto-detected board'}...")
    if not link.connect():
        print("Failed to connect! Is the board plugged in?")
        return

    # Most boards reset when the port opens
    time.sleep(2.0)

    try:
        print(f"\nSending: {codec.format_output()}")
        link.send(codec)

        print("\nReading replies for 5 seconds (Ctrl+C to stop)...")
        start = time.time()
        while time.time() - start < 5.0:
            if link.receive(codec):
                for i, triple in enumerate(codec.received_coordinates):
                    print(f"  Set {i}: x={triple.x} y={triple.y} z={triple.z}")

    except KeyboardInterrupt:
        print("\nInterrupted by user.")
    finally:
        print("\nDisconnecting...")
        link.disconnect()
        print("Done.")

if __name__ == "__main__":
    main()
