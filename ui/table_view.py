import tkinter as tk
from tkinter import ttk


class TableView(ttk.Frame):
    """Read-only preview of mapped BE-Alert records, with a text filter."""

    def __init__(self, parent, *args, **kwargs):
        super().__init__(parent, *args, **kwargs)
        control_frame = ttk.Frame(self)
        control_frame.pack(fill="x", pady=(0, 5))
        ttk.Label(control_frame, text="Filter:").pack(side="left", padx=(0, 5))
        self.search_var = tk.StringVar()
        self.search_entry = ttk.Entry(control_frame, textvariable=self.search_var, width=30)
        self.search_entry.pack(side="left", padx=(0, 10))
        self.search_entry.bind("<KeyRelease>", self._on_search)
        ttk.Button(control_frame, text="Clear", command=self._clear_search).pack(side="left")
        self.status_label = ttk.Label(control_frame, text="")
        self.status_label.pack(side="right")

        tree_frame = ttk.Frame(self)
        tree_frame.pack(fill="both", expand=True)
        self._tree = ttk.Treeview(tree_frame, show="headings")
        self._tree.pack(side="left", fill="both", expand=True)
        scroll_y = ttk.Scrollbar(tree_frame, orient="vertical", command=self._tree.yview)
        scroll_y.pack(side="right", fill="y")
        self._tree.configure(yscrollcommand=scroll_y.set)
        scroll_x = ttk.Scrollbar(self, orient="horizontal", command=self._tree.xview)
        scroll_x.pack(side="bottom", fill="x")
        self._tree.configure(xscrollcommand=scroll_x.set)

        self._columns = []
        self._records = []

    def _on_search(self, event=None):
        term = self.search_var.get().lower()
        if not term:
            self._show(self._records)
            self.status_label.config(text=f"Preview: {len(self._records)} rows")
            return
        matches = [r for r in self._records if any(term in cell.lower() for cell in r)]
        self._show(matches)
        self.status_label.config(text=f"{len(matches)} of {len(self._records)} rows")

    def _clear_search(self):
        self.search_var.set("")
        self._on_search()

    def _show(self, records):
        for item in self._tree.get_children(): self._tree.delete(item)
        self._tree["columns"] = tuple(self._columns)
        for col in self._columns:
            self._tree.heading(col, text=col)
            self._tree.column(col, anchor="w", width=120)
        for record in records:
            self._tree.insert("", "end", values=tuple(record))

    def clear(self):
        self._columns = []
        self._records = []
        for item in self._tree.get_children(): self._tree.delete(item)
        self._tree["columns"] = ()
        self.status_label.config(text="")

    def update_table_multi(self, columns, rows):
        self._columns = list(columns)
        self._records = [list(r) for r in rows]
        self.search_var.set("")
        self._show(self._records)
        self.status_label.config(text=f"Preview: {len(self._records)} rows")
