"""Native open/save file dialogs used when paths are not given on the command line."""

import os
import tkinter as tk
from tkinter import filedialog

from wbox_codec import WboxError

FILETYPES = [("Files", "*.wbox *.wbax *.json")]


class DialogError(WboxError):
    pass


class TkDialogs:
    """Open/save prompts backed by Tk. Each method returns None when cancelled."""

    def _root(self):
        try:
            root = tk.Tk()
        except tk.TclError as e:
            raise DialogError(f"Failed to open a file dialog: {e}") from e
        root.withdraw()
        root.attributes('-topmost', True)
        return root

    def pick_input_path(self):
        root = self._root()
        try:
            path = filedialog.askopenfilename(
                parent=root,
                title="Select the file to be processed",
                filetypes=FILETYPES,
            )
        except tk.TclError as e:
            raise DialogError(f"File dialog failed: {e}") from e
        finally:
            root.destroy()
        return path or None

    def pick_output_path(self, suggested_name, initial_dir=None):
        root = self._root()
        try:
            path = filedialog.asksaveasfilename(
                parent=root,
                title="Specify the path to save the file",
                initialfile=suggested_name,
                initialdir=initial_dir,
                defaultextension=os.path.splitext(suggested_name)[1],
            )
        except tk.TclError as e:
            raise DialogError(f"File dialog failed: {e}") from e
        finally:
            root.destroy()
        return path or None
