"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The board (rendered with OpenCV, click a cell to play)
- Game status and error banner
- Restart buttons
- A collapsible audit trail panel
"""

import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Optional

from display.config import DisplayConfig
from display.board_renderer import BoardRenderer
from game_controller import GameController


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(
        self,
        controller: Optional[GameController] = None,
        config: Optional[DisplayConfig] = None,
        screenshot_dir: Optional[str] = None
    ):
        """Initialize the UI."""
        self.config = config or DisplayConfig()
        self.controller = controller or GameController(config=self.config)
        self.renderer = BoardRenderer(self.config)
        self.screenshot_dir = screenshot_dir

        self.audit_open = False
        self.last_image = None

        # Create UI
        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.config

        self.root = tk.Tk()
        self.root.title(cfg.WINDOW_TITLE)
        self.root.configure(bg=cfg.BG_COLOR)
        self.root.geometry(cfg.WINDOW_GEOMETRY)
        self.root.minsize(*cfg.WINDOW_MIN_SIZE)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.CARD_COLOR)
        style.configure('TLabel', background=cfg.CARD_COLOR, foreground=cfg.TITLE_COLOR,
                        font=(cfg.FONT_FAMILY, 11))
        style.configure('Title.TLabel', font=(cfg.FONT_FAMILY, 18, 'bold'))
        style.configure('Subtitle.TLabel', font=(cfg.FONT_FAMILY, 10), foreground=cfg.HELPER_FG)
        style.configure('Status.TLabel', font=(cfg.FONT_FAMILY, 12), foreground=cfg.PRIMARY_COLOR)
        style.configure('Helper.TLabel', font=(cfg.FONT_FAMILY, 9), foreground=cfg.HELPER_FG)

        card = ttk.Frame(self.root)
        card.pack(fill=tk.BOTH, expand=True, padx=16, pady=16)

        # Header: title and restart
        header = ttk.Frame(card)
        header.pack(fill=tk.X, pady=(0, 10))

        title_frame = ttk.Frame(header)
        title_frame.pack(side=tk.LEFT)
        ttk.Label(title_frame, text=cfg.WINDOW_TITLE, style='Title.TLabel').pack(anchor=tk.W)
        ttk.Label(title_frame, text=cfg.WINDOW_SUBTITLE, style='Subtitle.TLabel').pack(anchor=tk.W)

        tk.Button(
            header,
            text="Restart",
            font=(cfg.FONT_FAMILY, 10, 'bold'),
            bg=cfg.CARD_COLOR,
            fg=cfg.PRIMARY_COLOR,
            command=self._reset_game
        ).pack(side=tk.RIGHT)

        # Status
        self.status_label = ttk.Label(card, text="", style='Status.TLabel')
        self.status_label.pack(fill=tk.X, pady=5)

        # Error banner (hidden until something is rejected)
        self.error_label = tk.Label(
            card,
            text="",
            font=(cfg.FONT_FAMILY, 10),
            bg=cfg.ERROR_BG,
            fg=cfg.ERROR_FG,
            anchor=tk.W,
            padx=10,
            pady=6
        )

        # Board canvas
        size = cfg.BOARD_OUTPUT_SIZE
        self.board_canvas = tk.Canvas(card, width=size, height=size, bg=cfg.CARD_COLOR,
                                      highlightthickness=2,
                                      highlightbackground=cfg.PRIMARY_COLOR)
        self.board_canvas.pack(pady=10)
        self.board_canvas.bind("<Button-1>", self._on_canvas_click)

        # Controls
        controls = ttk.Frame(card)
        controls.pack(fill=tk.X, pady=5)
        ttk.Label(controls, text=cfg.HELPER_TEXT, style='Helper.TLabel').pack(side=tk.LEFT)
        tk.Button(
            controls,
            text="Reset Game",
            font=(cfg.FONT_FAMILY, 10, 'bold'),
            bg=cfg.PRIMARY_COLOR,
            fg='white',
            command=self._reset_game
        ).pack(side=tk.RIGHT)

        # Audit trail panel
        ttk.Separator(card, orient='horizontal').pack(fill=tk.X, pady=10)
        audit_buttons = ttk.Frame(card)
        audit_buttons.pack(fill=tk.X)

        self.audit_toggle = tk.Button(
            audit_buttons,
            text="Show Audit Trail",
            font=(cfg.FONT_FAMILY, 10),
            command=self._toggle_audit
        )
        self.audit_toggle.pack(side=tk.LEFT)

        self.audit_clear = tk.Button(
            audit_buttons,
            text="Clear",
            font=(cfg.FONT_FAMILY, 10),
            command=self._clear_audit
        )

        self.audit_list = tk.Listbox(
            card,
            height=cfg.AUDIT_PANEL_HEIGHT,
            font=(cfg.FONT_FAMILY, 9),
            fg=cfg.HELPER_FG
        )

        # Keys
        self.root.bind("<Key-s>", lambda event: self._save_screenshot())
        self.root.bind("<Key-q>", lambda event: self._quit())
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_canvas_click(self, event):
        """Play the cell under the mouse."""
        # The board image is drawn at (0, 0) at its native size
        index = self.renderer.cell_at(event.x, event.y, self.renderer.size, self.renderer.size)
        if index is None:
            return

        try:
            self.controller.handle_cell_click(index)
        except Exception as e:
            print(f"Update error: {e}")

        self._refresh()

    def _reset_game(self):
        """Reset the game."""
        self.controller.reset_game()
        self._refresh()

    def _toggle_audit(self):
        """Show or hide the audit trail."""
        self.audit_open = not self.audit_open

        if self.audit_open:
            self.audit_toggle.configure(text="Hide Audit Trail")
            self.audit_clear.pack(side=tk.LEFT, padx=5)
            self.audit_list.pack(fill=tk.BOTH, expand=True, pady=(10, 0))
        else:
            self.audit_toggle.configure(text="Show Audit Trail")
            self.audit_clear.pack_forget()
            self.audit_list.pack_forget()

        self._update_audit_panel()

    def _clear_audit(self):
        self.controller.clear_audit()
        self._update_audit_panel()

    def _refresh(self):
        """Redraw board, status, banner and audit panel."""
        self._update_board_display()
        self._update_game_info()
        self._update_audit_panel()

    def _update_board_display(self):
        """Render the board and put it on the canvas."""
        winning_line = self.controller.win_checker.get_winning_line(self.controller.game_state)
        image = self.renderer.render(self.controller.board, winning_line)
        self.last_image = image

        photo = ImageTk.PhotoImage(Image.fromarray(self.renderer.to_rgb(image)))
        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

    def _update_game_info(self):
        """Update status label and error banner."""
        cfg = self.config
        over = self.controller.game_state.is_game_over

        self.status_label.configure(
            text=self.controller.status_message,
            foreground=cfg.ACCENT_COLOR if over else cfg.PRIMARY_COLOR
        )

        if self.controller.error_message:
            self.error_label.configure(text=self.controller.error_message)
            self.error_label.pack(fill=tk.X, pady=(0, 5), before=self.board_canvas)
        else:
            self.error_label.pack_forget()

    def _update_audit_panel(self):
        """Fill the audit list, newest first."""
        if not self.audit_open:
            return

        self.audit_list.delete(0, tk.END)
        events = self.controller.audit.recent()

        if not events:
            self.audit_list.insert(tk.END, "No audit events yet.")
            return

        for event in events:
            self.audit_list.insert(tk.END, event.describe())
            for line in event.details():
                self.audit_list.insert(tk.END, f"    {line}")

    def _save_screenshot(self):
        if self.last_image is None:
            return
        try:
            self.renderer.save_screenshot(self.last_image, self.screenshot_dir)
        except IOError as e:
            print(f"Screenshot failed: {e}")

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--user",
        default=DisplayConfig.DEFAULT_USER_ID,
        help="User id recorded in the audit trail"
    )
    args = parser.parse_args()

    ui = TicTacToeUI(controller=GameController(user_id=args.user))
    ui.run()


if __name__ == "__main__":
    main()
