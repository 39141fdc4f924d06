"""Tk interface: a character encoding viewer and a file encoding converter."""

from __future__ import annotations

import random
import re
from collections.abc import Callable
from pathlib import Path

from charcoder.convert import ConversionError, TargetEncoding, convert_file
from charcoder.encoding import EncodingInfo, code_units, describe, encode_char

try:
    import tkinter as tk
    from tkinter import filedialog, messagebox, ttk
except ImportError:  # Tk is optional for the layout helpers
    tk = filedialog = messagebox = ttk = None

ORIGINAL_ITEM_WIDTH = 35
ENCODING_ITEM_WIDTH = 90
ITEM_HEIGHT = 35
SPACING = 4
_GRID_GAP = 3
_MARGIN = 20

_RGB_RE = re.compile(r"rgb\((\d+),\s*(\d+),\s*(\d+)\)")


def columns_per_row(container_width: int, item_width: int, spacing: int) -> int:
    """Estimate how many items fit in one row of a container, at least one."""
    usable = container_width - _MARGIN
    per_row = abs(usable) // (item_width + spacing)
    return max(1, per_row if usable >= 0 else -per_row)


def grid_position(index: int, per_row: int) -> tuple[int, int]:
    """Return the (row, column) of the item at ``index`` in a grid."""
    return divmod(index, per_row)


def _require_tk() -> None:
    if tk is None:
        raise RuntimeError("tkinter is not available")


def _tk_color(css: str) -> str:
    match = _RGB_RE.fullmatch(css)
    if match is None:
        return css
    r, g, b = (int(value) for value in match.groups())
    return f"#{r:02x}{g:02x}{b:02x}"


def _displayable(ch: str) -> str:
    return "\ufffd" if 0xD800 <= ord(ch) <= 0xDFFF else ch


class _Tooltip:
    """Shows a small text window while the pointer is over a widget."""

    def __init__(self, widget, text: str) -> None:
        self._widget = widget
        self._text = text
        self._tip = None
        widget.bind("<Enter>", self._show, add="+")
        widget.bind("<Leave>", self._hide, add="+")

    def _show(self, _event=None) -> None:
        if self._tip is not None:
            return
        x = self._widget.winfo_rootx() + 20
        y = self._widget.winfo_rooty() + self._widget.winfo_height() + 5
        tip = tk.Toplevel(self._widget)
        tip.wm_overrideredirect(True)
        tip.wm_geometry(f"+{x}+{y}")
        tk.Label(
            tip, text=self._text, justify="left", background="#ffffe0",
            relief="solid", borderwidth=1,
        ).pack()
        self._tip = tip

    def _hide(self, _event=None) -> None:
        if self._tip is not None:
            self._tip.destroy()
            self._tip = None


class ClickableLabel:
    """A link-styled label that calls ``command`` on a left click."""

    def __init__(self, master, text: str, command: Callable[[], None] | None = None) -> None:
        _require_tk()
        self.widget = tk.Label(
            master, text=text, fg="blue", cursor="hand2",
            font=("Helvetica", 10, "underline"),
        )
        self._command = command
        self.widget.bind("<Button-1>", self._on_press)

    def _on_press(self, _event) -> None:
        if self._command is not None:
            self._command()


class ConverterWindow:
    """Window that re-encodes a chosen text file to UTF-8 or GBK."""

    def __init__(self, parent) -> None:
        _require_tk()
        self.parent = parent
        self.selected_path: str | None = None
        self.window = tk.Toplevel(parent)
        self.window.title("文件编码转换器")
        self.window.protocol("WM_DELETE_WINDOW", self.window.withdraw)

        controls = tk.Frame(self.window)
        controls.pack(fill="x", padx=5, pady=5)
        self.encoding_var = tk.StringVar(value=TargetEncoding.UTF8.value)
        ttk.Combobox(
            controls, textvariable=self.encoding_var, state="readonly",
            values=[target.value for target in TargetEncoding],
        ).pack(side="left")
        tk.Button(controls, text="选择文件", command=self.select_file).pack(side="left", padx=3)
        tk.Button(controls, text="转换", command=self.convert).pack(side="left", padx=3)
        tk.Button(controls, text="返回", command=self.back).pack(side="right")

        tk.Label(self.window, text="请选择一个txt文件并选择目标编码...", fg="gray").pack(anchor="w", padx=5)
        self.status = tk.Text(self.window, height=10, state="disabled")
        self.status.pack(fill="both", expand=True, padx=5, pady=5)

    def _log(self, message: str) -> None:
        self.status.configure(state="normal")
        self.status.insert("end", message + "\n")
        self.status.see("end")
        self.status.configure(state="disabled")

    def select_file(self) -> None:
        """Ask for a text file and remember it."""
        path = filedialog.askopenfilename(
            parent=self.window, title="选择文本文件", initialdir=str(Path.home()),
            filetypes=[("文本文件", "*.txt")],
        )
        if path:
            self.selected_path = path
            self._log(f"已选择文件: {path}")

    def convert(self) -> None:
        """Convert the selected file to the chosen encoding."""
        if not self.selected_path:
            messagebox.showwarning("警告", "请先选择一个文本文件！", parent=self.window)
            return
        encoding = self.encoding_var.get()
        try:
            result = convert_file(self.selected_path, encoding)
        except ConversionError as exc:
            messagebox.showerror("错误", str(exc), parent=self.window)
            return
        self._log(f"转换完成！输出文件: {result}")
        messagebox.showinfo(
            "成功", f"文件已成功转换为{encoding}编码！\n输出文件: {result}", parent=self.window,
        )

    def back(self) -> None:
        """Return to the parent window."""
        if self.parent is not None:
            self.parent.deiconify()
        self.window.withdraw()


class MainWindow:
    """Shows each character of the input with its UTF-8 encoding in colour."""

    def __init__(self, root=None) -> None:
        _require_tk()
        self.root = root if root is not None else tk.Tk()
        self.root.title("文字编码显示器")
        self.encoding_map: dict[str, EncodingInfo] = {}
        self._rng = random.Random()
        self._converter: ConverterWindow | None = None

        tk.Label(self.root, text="请输入要转换的文本...", fg="gray").pack(anchor="w", padx=5)
        self.text = tk.Text(self.root, height=6)
        self.text.pack(fill="x", padx=5, pady=5)

        controls = tk.Frame(self.root)
        controls.pack(fill="x", padx=5)
        tk.Button(controls, text="转换编码", command=self.convert).pack(side="left")
        tk.Button(controls, text="清空", command=self.clear).pack(side="left", padx=3)
        self.link = ClickableLabel(controls, "文件编码转换", self.open_converter)
        self.link.widget.pack(side="right")

        self.original_frame = tk.Frame(self.root, padx=5, pady=5)
        self.original_frame.pack(fill="both", expand=True)
        self.encoding_frame = tk.Frame(self.root, padx=5, pady=5)
        self.encoding_frame.pack(fill="both", expand=True)
        self.root.geometry("800x600")

    @staticmethod
    def _clear_frame(frame) -> None:
        for child in frame.winfo_children():
            child.destroy()

    @staticmethod
    def _cell(master, text: str, width: int, color: str, tooltip: str, family: str):
        background = _tk_color(color)
        frame = tk.Frame(
            master, width=width, height=ITEM_HEIGHT, bg=background,
            highlightthickness=1, highlightbackground="#cccccc",
        )
        frame.pack_propagate(False)
        label = tk.Label(frame, text=text, bg=background, font=(family, -14), wraplength=width)
        label.pack(fill="both", expand=True)
        _Tooltip(label, tooltip)
        return frame

    def convert(self) -> None:
        """Lay out the input text and the UTF-8 encoding of each code unit."""
        text = self.text.get("1.0", "end-1c")
        if not text:
            return
        self.encoding_map.clear()
        self._clear_frame(self.original_frame)
        self._clear_frame(self.encoding_frame)

        self.root.update_idletasks()
        width = self.original_frame.winfo_width()
        chars_per_row = columns_per_row(width, ORIGINAL_ITEM_WIDTH, SPACING)
        encodings_per_row = columns_per_row(width, ENCODING_ITEM_WIDTH, SPACING)

        for index, ch in enumerate(code_units(text)):
            info = encode_char(ch, self._rng)
            self.encoding_map[ch] = info
            shown = _displayable(ch)
            tooltip = describe(shown, info)

            row, column = grid_position(index, chars_per_row)
            self._cell(
                self.original_frame, shown, ORIGINAL_ITEM_WIDTH, info.color, tooltip, "Helvetica",
            ).grid(row=row, column=column, padx=(0, _GRID_GAP), pady=(0, _GRID_GAP))

            row, column = grid_position(index, encodings_per_row)
            self._cell(
                self.encoding_frame, info.utf8_hex, ENCODING_ITEM_WIDTH, info.color, tooltip, "Courier",
            ).grid(row=row, column=column, padx=(0, _GRID_GAP), pady=(0, _GRID_GAP))

    def clear(self) -> None:
        """Empty the input and both grids."""
        self.text.delete("1.0", "end")
        self._clear_frame(self.original_frame)
        self._clear_frame(self.encoding_frame)
        self.encoding_map.clear()

    def open_converter(self) -> None:
        """Show the file converter window, creating it on first use."""
        if self._converter is None:
            self._converter = ConverterWindow(self.root)
        self._converter.window.deiconify()
        self._converter.window.lift()


def main(argv: list[str] | None = None) -> int:
    """Start the application and run until its main window is closed."""
    del argv
    window = MainWindow()
    window.root.mainloop()
    return 0