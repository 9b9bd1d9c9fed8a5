"""A sample application with a layer that reacts to the Enter key."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from hazel import input as hz_input
from hazel.application import Application, run_application
from hazel.input_codes import Key
from hazel.layer import Layer
from hazel.log import client_logger
from hazel.window import Window


class ExampleLayer(Layer):
    """Logs a running count each frame that Enter is held."""

    def __init__(self) -> None:
        super().__init__("Example")
        self.enter_presses = 0

    def on_update(self) -> None:
        if hz_input.is_key_pressed(Key.ENTER):
            self.enter_presses += 1
            client_logger().info("You pressed Enter! %d", self.enter_presses)


class SandboxApp(Application):
    """An application holding a single example layer."""

    def __init__(self, window: Optional[Window] = None) -> None:
        super().__init__(window)
        self.push_layer(ExampleLayer())


def create_application() -> Application:
    """The sandbox application."""
    return SandboxApp()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sandbox application."""
    parser = argparse.ArgumentParser(prog="sandbox", description="Run the sandbox application.")
    parser.parse_args(argv)
    run_application(create_application)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())