import logging
import tkinter as tk
from tkinter import ttk, filedialog, messagebox

from controllers.conversion_controller import ConversionController
from ui.table_view import TableView

logger = logging.getLogger(__name__)


class MainWindow:
    def __init__(self):
        self.controller = ConversionController()

        self.window = tk.Tk()
        self.window.title("BE-Alert XLSX naar CSV")
        self.window.geometry("1100x650")
        self.window.protocol("WM_DELETE_WINDOW", self.on_closing)

        self.input_var = tk.StringVar()
        self.output_var = tk.StringVar()

        self.toolbar = ttk.Frame(self.window, relief=tk.RAISED, borderwidth=1)
        self.toolbar.pack(side="top", fill="x")
        ttk.Button(self.toolbar, text="📂 Import XLSX", command=self.import_action).pack(side="left", padx=5, pady=5)
        ttk.Button(self.toolbar, text="💾 Export CSV", command=self.export_action).pack(side="left", padx=5, pady=5)
        ttk.Separator(self.toolbar, orient="vertical").pack(side="left", fill="y", padx=10, pady=5)
        ttk.Button(self.toolbar, text="Reset", command=self.reset_action).pack(side="left", padx=5, pady=5)

        files = ttk.Frame(self.window, padding=(10, 5))
        files.pack(side="top", fill="x")
        files.columnconfigure(1, weight=1)
        ttk.Label(files, text="XLSX:").grid(row=0, column=0, sticky="w")
        ttk.Label(files, textvariable=self.input_var).grid(row=0, column=1, sticky="w", padx=5)
        self.lbl_import = ttk.Label(files, text="", width=3)
        self.lbl_import.grid(row=0, column=2)
        ttk.Label(files, text="CSV:").grid(row=1, column=0, sticky="w")
        ttk.Label(files, textvariable=self.output_var).grid(row=1, column=1, sticky="w", padx=5)
        self.lbl_export = ttk.Label(files, text="", width=3)
        self.lbl_export.grid(row=1, column=2)

        self.status_frame = ttk.Frame(self.window, relief=tk.SUNKEN, padding=(5, 2))
        self.status_frame.pack(side="bottom", fill="x")
        self.lbl_status = ttk.Label(self.status_frame, text="Ready.", anchor="w")
        self.lbl_status.pack(side="left", fill="x")
        self.progress = ttk.Progressbar(self.status_frame, mode='indeterminate', length=200)

        self.table = TableView(self.window)
        self.table.pack(fill="both", expand=True, padx=10, pady=10)

    def run_task(self, description, func, error_prefix="Error"):
        """Runs func with a busy cursor; returns True when it succeeded."""
        self.window.config(cursor="watch")
        self.lbl_status.config(text=f"⏳ {description}...")
        self.progress.pack(side="right", padx=10)
        self.progress.start(10)
        self.window.update()
        try:
            func()
            return True
        except Exception as e:
            logger.error("%s failed: %s", description, e)
            self.lbl_status.config(text=f"❌ {error_prefix}: {e}")
            messagebox.showerror(error_prefix, str(e))
            return False
        finally:
            self.progress.stop()
            self.progress.pack_forget()
            self.window.config(cursor="")

    @staticmethod
    def _mark(label, checked, ok):
        label.config(text=("✅" if ok else "❌") if checked else "")

    # --- IMPORT ---
    def import_action(self):
        path = filedialog.askopenfilename(filetypes=[("Excel", "*.xlsx")])
        if not path: return
        self.input_var.set(path)
        self.output_var.set("")
        self._mark(self.lbl_export, False, False)
        self.table.clear()

        def _validate():
            self.controller.validate_schema(path)
            header, rows = self.controller.preview(path)
            self.table.update_table_multi(header, rows)

        ok = self.run_task("Checking columns", _validate, error_prefix="XLSX error")
        self._mark(self.lbl_import, True, ok)
        if ok: self.lbl_status.config(text="✅ XLSX selected and columns OK.")

    # --- EXPORT ---
    def export_action(self):
        source = self.input_var.get()
        if not source.strip():
            self.lbl_status.config(text="No XLSX selected.")
            return
        out = filedialog.asksaveasfilename(
            initialfile=self.controller.suggest_output_name(source),
            defaultextension=".csv",
            filetypes=[("CSV", "*.csv")],
        )
        if not out: return
        result = {}

        def _convert():
            result['res'] = self.controller.convert(source, out)

        ok = self.run_task("Writing CSV", _convert)
        self._mark(self.lbl_export, True, ok)
        if ok:
            self.output_var.set(out)
            self.lbl_status.config(text=f"✅ CSV saved ({result['res'].rows_written} rows).")

    def reset_action(self):
        self.input_var.set("")
        self.output_var.set("")
        self._mark(self.lbl_import, False, False)
        self._mark(self.lbl_export, False, False)
        self.table.clear()
        self.lbl_status.config(text="Ready.")

    def on_closing(self):
        self.window.destroy()

    def run(self): self.window.mainloop()
