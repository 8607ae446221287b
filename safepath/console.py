"""Interactive menu for placing obstacles and querying a Mission.

All raw-text parsing and re-prompting lives here. Each ``read_*`` helper loops
until the input parses; the core only ever sees validated values.
"""

from __future__ import annotations

from typing import Callable, Optional

from .environment import Coordinate, Direction
from .errors import InvalidCount, InvalidFenceGeometry, InvalidRectangle
from .mission import Mission

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

MENU = "\n".join(
    [
        "Select one of the following options",
        "g) Add 'Guard' obstacle",
        "f) Add 'Fence' obstacle",
        "s) Add 'Sensor' obstacle",
        "c) Add 'Camera' obstacle",
        "n) Add 'Nanobot' field",
        "d) Show safe directions",
        "m) Display obstacle map",
        "p) Find safe path",
        "x) Exit",
        "Enter code:",
    ]
)


def parse_coordinates(text: str) -> Coordinate:
    """Parse ``"X,Y"`` into an int pair. Raises ValueError otherwise."""
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(f"Expected X,Y (got {text!r})")
    return int(parts[0].strip()), int(parts[1].strip())


class Console:
    """Menu loop bound to one Mission.

    ``input_fn`` and ``output_fn`` default to the builtins; tests pass
    scripted replacements.
    """

    def __init__(
        self,
        mission: Optional[Mission] = None,
        *,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ):
        self.mission = mission if mission is not None else Mission()
        self._input = input_fn
        self._output = output_fn
        self._actions = {
            "g": self.add_guard,
            "f": self.add_fence,
            "s": self.add_sensor,
            "c": self.add_camera,
            "n": self.add_nanobots,
            "d": self.show_safe_directions,
            "m": self.display_map,
            "p": self.find_safe_path,
        }

    def say(self, message: str) -> None:
        self._output(message)

    def ask(self, prompt: str) -> str:
        self.say(prompt)
        return self._input("")

    def run(self) -> None:
        """Show the menu until ``x`` is chosen or input runs out."""
        while True:
            try:
                choice = self.ask(MENU).strip().lower()
            except EOFError:
                return
            if choice == "x":
                return
            action = self._actions.get(choice)
            if action is None:
                self.say("Invalid option.")
                continue
            try:
                action()
            except EOFError:
                return

    # ------------------------------------------------------------------
    # Input helpers
    # ------------------------------------------------------------------

    def read_coordinates(self, prompt: str) -> Coordinate:
        self.say(prompt)
        while True:
            try:
                return parse_coordinates(self._input(""))
            except ValueError:
                self.say("Invalid input.")

    def read_positive_float(self, prompt: str) -> float:
        self.say(prompt)
        while True:
            try:
                value = float(self._input(""))
            except ValueError:
                value = 0.0
            if value > 0 and value != float("inf"):
                return value
            self.say("Invalid input. Please enter a positive floating point number.")

    def read_positive_int(self, prompt: str) -> int:
        self.say(prompt)
        while True:
            try:
                value = int(self._input(""))
            except ValueError:
                value = 0
            if value > 0:
                return value
            self.say("Invalid input. Please enter a positive whole number.")

    def read_direction(self, prompt: str) -> Direction:
        self.say(prompt)
        while True:
            try:
                # Only the first letter counts, as in "(n, s, e or w)"
                return Direction.parse(self._input("").strip()[:1])
            except ValueError:
                self.say("Invalid direction.")

    # ------------------------------------------------------------------
    # Menu actions
    # ------------------------------------------------------------------

    def add_guard(self) -> None:
        location = self.read_coordinates("Enter the Guard's location (X,Y):")
        self.mission.place_guard(location)

    def add_fence(self) -> None:
        while True:
            start = self.read_coordinates("Enter the location where the fence starts (X,Y):")
            end = self.read_coordinates("Enter the location where the fence ends (X,Y):")
            try:
                self.mission.place_fence(start, end)
                return
            except InvalidFenceGeometry:
                self.say("Fences must be horizontal or vertical.")

    def add_sensor(self) -> None:
        location = self.read_coordinates("Enter the sensor's location (X,Y):")
        sensor_range = self.read_positive_float("Enter the sensor's range (in klicks):")
        self.mission.place_sensor(location, sensor_range)

    def add_camera(self) -> None:
        location = self.read_coordinates("Enter the camera's location (X,Y):")
        direction = self.read_direction("Enter the direction the camera is facing (n, s, e or w):")
        self.mission.place_camera(location, direction)

    def add_nanobots(self) -> None:
        while True:
            top_left = self.read_coordinates("Enter the top-left cell of the nanobot field (X,Y):")
            bottom_right = self.read_coordinates("Enter the bottom-right cell of the nanobot field (X,Y):")
            count = self.read_positive_int("Enter the number of nanobots:")
            try:
                self.mission.place_nanobots(top_left, bottom_right, count)
                return
            except InvalidRectangle:
                self.say("Invalid field specification.")
            except InvalidCount:
                self.say("The field is too small for that many nanobots.")

    def show_safe_directions(self) -> None:
        location = self.read_coordinates("Enter your current location (X,Y):")
        report = self.mission.safe_directions(location)
        if report.outcome == "compromised":
            self.say("Agent, your location is compromised. Abort mission.")
        elif report.outcome == "no_safe_direction":
            self.say("You cannot safely move in any direction. Abort mission.")
        else:
            self.say(
                "You can safely take any of the following directions: "
                + "".join(report.directions)
            )

    def display_map(self) -> None:
        while True:
            top_left = self.read_coordinates("Enter the location of the top-left cell of the map (X,Y):")
            bottom_right = self.read_coordinates("Enter the location of the bottom-right cell of the map (X,Y):")
            try:
                self.say(self.mission.render_map(top_left, bottom_right))
                return
            except InvalidRectangle:
                self.say("Invalid map specification.")

    def find_safe_path(self) -> None:
        start = self.read_coordinates("Enter your current location (X,Y):")
        goal = self.read_coordinates("Enter the location of the mission objective (X,Y):")
        report = self.mission.plan_route(start, goal)
        if report.outcome == "found":
            self.say("The following path will take you to the objective:")
            self.say(report.route)
        elif report.outcome == "already_at_objective":
            self.say("Agent, you are already at the objective.")
        elif report.outcome == "goal_blocked":
            self.say("The objective is blocked by an obstacle and cannot be reached.")
        elif report.outcome == "start_compromised":
            self.say("Agent, your location is compromised. Abort mission.")
        elif report.outcome == "search_limit":
            self.say("The search area is too large to find a safe path.")
        else:
            self.say("There is no safe path to the objective.")
