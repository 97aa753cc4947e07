"""Tk windows for managing interview groups and drawing their questions."""

from __future__ import annotations

import argparse
import tkinter as tk
from tkinter import messagebox, ttk
from typing import Callable

from questiondraw.lottery import DRAW_DURATION_MS, Lottery
from questiondraw.selection import Bank, BankSelection
from questiondraw.store import (
    DEFAULT_ROOT,
    QUESTION_COUNT,
    ProjectStore,
    QuestionBanks,
    StoreError,
)

TITLE_FONT = ("华文行楷", 30)
INFO_FONT = ("华文行楷", 26)
BUTTON_FONT = ("华文行楷", 20)
NUMBER_FONT = ("宋体", 14)
ROW_LENGTH = 10
PLACEHOLDER_TEXT = "第？题"


def question_label_text(number: int, offset: int = 0) -> str:
    """Text shown for a drawn question, its number shifted by the bank offset."""
    return f"第 {number + offset} 题"


def _screen_geometry(widget: tk.Misc, share: float) -> str:
    width = int(widget.winfo_screenwidth() * share)
    height = int(widget.winfo_screenheight() * share)
    return f"{width}x{height}"


def _maximize(window: tk.Wm) -> None:
    try:
        window.state("zoomed")
    except tk.TclError:
        try:
            window.attributes("-zoomed", True)
        except tk.TclError:
            pass


def _modal(window: tk.Toplevel, master: tk.Misc) -> None:
    window.transient(master)
    window.grab_set()
    window.focus_set()


class ExtractDialog:
    """Draws one difficult (A) and one simple (B) question for a group."""

    def __init__(self, master: tk.Misc, store: ProjectStore, project: str) -> None:
        self.store = store
        self.project = project
        self.window = tk.Toplevel(master)
        self.window.title("复试题目抽取")
        self.window.geometry(_screen_geometry(master, 0.8))
        _maximize(self.window)

        try:
            banks = store.load_banks(project)
        except StoreError as exc:
            messagebox.showerror("错误", str(exc), parent=self.window)
            banks = QuestionBanks([0] * QUESTION_COUNT, [0] * QUESTION_COUNT)
        self.lottery = Lottery(banks)
        self._tick_job: str | None = None
        self._stop_job: str | None = None

        body = tk.Frame(self.window)
        body.pack(expand=True, fill="both")

        group_row = tk.Frame(body)
        group_row.pack(expand=True)
        tk.Label(group_row, text="当前复试小组:", font=TITLE_FONT).pack(side="left")
        tk.Label(group_row, text=project, font=TITLE_FONT).pack(side="left")

        banks_row = tk.Frame(body)
        banks_row.pack(expand=True, fill="x")
        banks_row.columnconfigure((0, 1), weight=1)
        tk.Label(banks_row, text="当前题库:A库", font=TITLE_FONT).grid(row=0, column=0)
        tk.Label(banks_row, text="当前题库:B库", font=TITLE_FONT).grid(row=0, column=1)
        self.difficult_label = tk.Label(
            banks_row, text=PLACEHOLDER_TEXT, font=TITLE_FONT, fg="red"
        )
        self.difficult_label.grid(row=1, column=0)
        self.simple_label = tk.Label(
            banks_row, text=PLACEHOLDER_TEXT, font=TITLE_FONT, fg="red"
        )
        self.simple_label.grid(row=1, column=1)

        self.info_label = tk.Label(body, text="等待抽题", font=INFO_FONT, fg="red")
        self.info_label.pack(expand=True)

        self.start_button = tk.Button(
            body, text="开始抽题", font=TITLE_FONT, command=self.start
        )
        self.start_button.pack(expand=True)

        tk.Button(body, text="返回", font=BUTTON_FONT, command=self.close).pack(
            side="right", padx=10, pady=10
        )
        self.window.protocol("WM_DELETE_WINDOW", self.close)
        _modal(self.window, master)

    def start(self) -> None:
        self.info_label.config(text="正在抽题中...")
        self.start_button.config(state="disabled")
        self._tick_job = self.window.after(self.lottery.interval, self._tick)
        self._stop_job = self.window.after(DRAW_DURATION_MS, self.stop)

    def _tick(self) -> None:
        difficult, simple = self.lottery.step()
        if difficult:
            self.difficult_label.config(text=question_label_text(difficult))
        if simple:
            self.simple_label.config(
                text=question_label_text(simple, Bank.SIMPLE.offset)
            )
        self._tick_job = self.window.after(self.lottery.interval, self._tick)

    def _cancel_jobs(self) -> None:
        for job in (self._tick_job, self._stop_job):
            if job is not None:
                self.window.after_cancel(job)
        self._tick_job = None
        self._stop_job = None

    def stop(self) -> None:
        self._cancel_jobs()
        outcome = self.lottery.finish()
        self.info_label.config(text=outcome.message())
        try:
            self.store.save_banks(self.project, self.lottery.banks)
        except StoreError as exc:
            messagebox.showerror("错误", str(exc), parent=self.window)
        self.start_button.config(state="normal")

    def close(self) -> None:
        self._cancel_jobs()
        self.window.destroy()


class ModifyDialog:
    """Lets the user mark questions of a group as removed or available."""

    def __init__(self, master: tk.Misc, store: ProjectStore) -> None:
        self.store = store
        self.project = ""
        self.banks = QuestionBanks.fresh()
        self.selection = BankSelection.from_banks(self.banks)
        self._buttons: dict[tuple[Bank, int], tk.Button] = {}

        self.window = tk.Toplevel(master)
        self.window.title("修改复试小组题库")
        self.window.geometry(_screen_geometry(master, 0.4))

        self._project_var = tk.StringVar(self.window, value="")
        self.project_row = tk.Frame(self.window)
        self.project_row.pack(expand=True)
        self._show_projects()

        for bank in (Bank.DIFFICULT, Bank.SIMPLE):
            self._build_bank(bank)

        actions = tk.Frame(self.window)
        actions.pack(expand=True)
        tk.Button(
            actions, text="修改", font=BUTTON_FONT, command=self.modify
        ).pack(side="left", padx=20)
        tk.Button(
            actions, text="返回", font=BUTTON_FONT, command=self.window.destroy
        ).pack(side="left", padx=20)

        self._refresh_buttons()
        _modal(self.window, master)

    def _show_projects(self) -> None:
        for child in self.project_row.winfo_children():
            child.destroy()
        try:
            names = self.store.list_projects()
        except StoreError:
            names = []
        for name in names:
            tk.Radiobutton(
                self.project_row,
                text=name,
                value=name,
                variable=self._project_var,
                indicatoron=False,
                font=BUTTON_FONT,
                command=lambda name=name: self.select_project(name),
            ).pack(side="left", padx=4)

    def _build_bank(self, bank: Bank) -> None:
        tk.Label(self.window, text=bank.title, font=BUTTON_FONT).pack(pady=(10, 0))
        grid = tk.Frame(self.window)
        grid.pack()
        for number in range(1, QUESTION_COUNT + 1):
            row, column = divmod(number - 1, ROW_LENGTH)
            button = tk.Button(
                grid,
                text=str(number + bank.offset),
                font=NUMBER_FONT,
                width=4,
                command=lambda bank=bank, number=number: self._toggle(bank, number),
            )
            button.grid(row=row, column=column, padx=2, pady=2)
            self._buttons[bank, number] = button

    def _toggle(self, bank: Bank, number: int) -> None:
        self.selection.toggle(bank, number)
        self._refresh_button(bank, number)

    def _refresh_button(self, bank: Bank, number: int) -> None:
        removed = self.selection.is_removed(bank, number)
        self._buttons[bank, number].config(relief="sunken" if removed else "raised")

    def _refresh_buttons(self) -> None:
        for bank, number in self._buttons:
            self._refresh_button(bank, number)

    def select_project(self, name: str) -> None:
        self.project = name
        try:
            self.banks = self.store.load_banks(name)
        except StoreError:
            pass
        self.selection.apply_banks(self.banks)
        self._refresh_buttons()

    def modify(self) -> None:
        if not self.project:
            messagebox.showerror("错误", "请先选择复试小组！", parent=self.window)
            return
        self.banks = self.selection.to_banks()
        try:
            self.store.save_banks(self.project, self.banks)
        except StoreError as exc:
            messagebox.showerror("错误", str(exc), parent=self.window)
            return
        messagebox.showinfo("information", "修改成功！", parent=self.window)


class MainWindow:
    """Lists the interview groups and offers add, delete, modify and reset."""

    def __init__(self, root: tk.Tk, store: ProjectStore) -> None:
        self.root = root
        self.store = store
        root.title("复试题目抽取")
        root.geometry(_screen_geometry(root, 0.8))

        tk.Label(
            root, text="请选择复试小组", font=(TITLE_FONT[0], TITLE_FONT[1], "bold")
        ).pack(pady=40)
        self.project_row = tk.Frame(root)
        self.project_row.pack(expand=True)

        actions = tk.Frame(root)
        actions.pack(side="bottom", anchor="e", padx=10, pady=10)
        for text, command in (
            ("添加", self._add_dialog),
            ("删除", self._delete_dialog),
            ("修改", self._modify_dialog),
            ("重置", self._reset_dialog),
        ):
            tk.Button(actions, text=text, command=command).pack(side="left", padx=2)

        self.show_projects()

    def show_projects(self) -> None:
        for child in self.project_row.winfo_children():
            child.destroy()
        try:
            names = self.store.list_projects()
        except StoreError:
            messagebox.showerror("错误", "project文件夹创建失败", parent=self.root)
            return
        for name in names:
            tk.Button(
                self.project_row,
                text=name,
                font=INFO_FONT,
                command=lambda name=name: self._open_extract(name),
            ).pack(side="left", padx=8)

    def _open_extract(self, name: str) -> None:
        dialog = ExtractDialog(self.root, self.store, name)
        self.root.wait_window(dialog.window)

    def _modify_dialog(self) -> None:
        dialog = ModifyDialog(self.root, self.store)
        self.root.wait_window(dialog.window)

    def _add_dialog(self) -> None:
        dialog = tk.Toplevel(self.root)
        dialog.title("添加小组")
        accepted = False

        row = tk.Frame(dialog)
        row.pack(padx=10, pady=10)
        tk.Label(row, text="组名:").pack(side="left")
        entry = tk.Entry(row)
        entry.pack(side="left")

        def confirm() -> None:
            nonlocal accepted
            name = entry.get()
            if not name:
                messagebox.showwarning("警告", "组名不能为空", parent=dialog)
                return
            try:
                self.store.add(name)
            except StoreError:
                messagebox.showinfo("提示", f"添加{name}失败", parent=dialog)
                return
            messagebox.showinfo("提示", f"添加{name}成功", parent=dialog)
            accepted = True
            dialog.destroy()

        buttons = tk.Frame(dialog)
        buttons.pack(pady=(0, 10))
        tk.Button(buttons, text="确定", command=confirm).pack(side="left", padx=4)
        tk.Button(buttons, text="返回", command=dialog.destroy).pack(side="left", padx=4)

        _modal(dialog, self.root)
        entry.focus_set()
        self.root.wait_window(dialog)
        if accepted:
            self.show_projects()

    def _choice_dialog(
        self,
        title: str,
        verb: str,
        single: Callable[[str], None],
        every: Callable[[], None],
    ) -> None:
        dialog = tk.Toplevel(self.root)
        dialog.title(title)
        accepted = False

        row = tk.Frame(dialog)
        row.pack(padx=10, pady=10)
        tk.Label(row, text="组名:").pack(side="left")
        try:
            names = self.store.list_projects()
        except StoreError:
            messagebox.showerror("错误", "project文件夹创建失败", parent=dialog)
            names = []
        combo = ttk.Combobox(row, values=names, state="readonly", height=7)
        if names:
            combo.current(0)
        combo.pack(side="left")

        def run_single() -> None:
            nonlocal accepted
            name = combo.get()
            try:
                single(name)
            except StoreError:
                messagebox.showinfo("提示", f"{verb}{name}失败！", parent=dialog)
                return
            messagebox.showinfo("提示", f"{verb}{name}成功！", parent=dialog)
            accepted = True
            dialog.destroy()

        def run_every() -> None:
            nonlocal accepted
            try:
                every()
            except StoreError:
                messagebox.showinfo("提示", f"{verb}所有小组失败！", parent=dialog)
                return
            messagebox.showinfo("提示", f"{verb}所有小组成功！", parent=dialog)
            accepted = True
            dialog.destroy()

        for text, command in (
            (verb, run_single),
            (f"{verb}全部", run_every),
            ("返回", dialog.destroy),
        ):
            tk.Button(dialog, text=text, command=command).pack(fill="x", padx=10, pady=2)

        _modal(dialog, self.root)
        self.root.wait_window(dialog)
        if accepted:
            self.show_projects()

    def _delete_dialog(self) -> None:
        self._choice_dialog("删除小组", "删除", self.store.delete, self.store.delete_all)

    def _reset_dialog(self) -> None:
        self._choice_dialog("重置题库", "重置", self.store.reset, self.store.reset_all)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Draw interview questions per group.")
    parser.add_argument(
        "--root",
        default=DEFAULT_ROOT,
        help="folder that holds the group files (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    root = tk.Tk()
    MainWindow(root, ProjectStore(args.root))
    _maximize(root)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())