"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.

Console commands:
    0-8   place a marker on that cell
    r     reset the game
    a     show the audit trail
    s     save a screenshot of the board
    q     quit
"""

from typing import Optional

from display.config import DisplayConfig
from display.board_renderer import BoardRenderer
from game_controller import GameController


def parse_cell(text: str):
    """Turn console input into a cell index; anything else is passed through."""
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        return text


def print_audit_trail(controller: GameController):
    """Print the audit trail, newest first."""
    events = controller.audit.recent()
    print("\n" + "="*60)
    print("   Audit Trail")
    print("="*60)
    if not events:
        print("  No audit events yet.")
    for event in events:
        print(f"  {event.describe()}")
        for line in event.details():
            print(f"      {line}")
    print("="*60)


class ConsoleGame:
    """
    Console version of the game.

    Reads one command per line until the user quits.
    """

    def __init__(self, controller: GameController, screenshot_dir: Optional[str] = None):
        self.controller = controller
        self.renderer = BoardRenderer(controller.config)
        self.screenshot_dir = screenshot_dir
        self.is_running = False

    def handle_command(self, command: str):
        """Run a single console command."""
        command = command.strip().lower()

        if command == 'q':
            print("\nGame quit by user.")
            self.is_running = False
        elif command == 'r':
            self.controller.reset_game()
        elif command == 'a':
            print_audit_trail(self.controller)
        elif command == 's':
            image = self.renderer.render(
                self.controller.board,
                self.controller.win_checker.get_winning_line(self.controller.game_state)
            )
            try:
                self.renderer.save_screenshot(image, self.screenshot_dir)
            except IOError as e:
                print(f"Screenshot failed: {e}")
        else:
            self.controller.handle_cell_click(parse_cell(command))

    def start(self, input_func=input):
        """Start the game loop."""
        print("\nStarting TicTacToe game...")
        print("Enter a cell 0-8, 'r' to reset, 'a' for audit trail, 's' for screenshot, 'q' to quit\n")

        self.is_running = True
        while self.is_running:
            self.controller.game_state.print_board()
            print(self.controller.status_message)
            if self.controller.error_message:
                print(f"!! {self.controller.error_message}")

            try:
                command = input_func("> ")
            except EOFError:
                break
            self.handle_command(command)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--user",
        default=DisplayConfig.DEFAULT_USER_ID,
        help="User id recorded in the audit trail"
    )
    parser.add_argument(
        "--screenshot-dir",
        default=DisplayConfig.SCREENSHOT_DIR,
        help="Where screenshots are saved"
    )

    args = parser.parse_args()
    controller = GameController(user_id=args.user)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(controller=controller, screenshot_dir=args.screenshot_dir)
        ui.run()
        return

    game = ConsoleGame(controller, screenshot_dir=args.screenshot_dir)
    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
