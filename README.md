# questiondraw

A small desktop tool for running oral interviews. Each interview group has
two question banks of 30 questions each:

* **A bank** (difficult questions), shown as 1–30
* **B bank** (simple questions), shown as 31–60

Clicking the draw button (开始抽题) spins both banks for four seconds,
slowing down as it goes, and then settles on one question from each. A drawn
question is taken out of its bank, so it will not come up again for that
group until the bank is reset. When a bank has nothing left to draw, the
window says so.

## Running

The interface uses Tk through the standard `tkinter` module, so Python must
have Tk support available.

```
pip install .
questiondraw
```

By default the program keeps its data in a `project` folder in the current
working directory and creates that folder if it does not exist. Another
folder can be given with `--root`:

```
questiondraw --root /path/to/groups
```

## What the main window offers

* one button per group; clicking it opens the draw window for that group
* **添加** – add a new group with both banks full
* **删除** – delete one group, or every group
* **修改** – choose a group and mark which questions are taken out of each bank
* **重置** – refill the banks of one group, or of every group

## Group files

Every group is stored as `<root>/<group name>.txt`, three lines long:

```
<group name>
简单题,1,2,3,...,30
困难题,1,2,3,...,30
```

The second line is the B bank and the third the A bank. A question that has
been drawn or taken out is written as `0` in its place. Fields that are not
numbers are read as `0`.

## Using it from Python

The storage and drawing logic work without the window:

```python
import random
from questiondraw.store import ProjectStore
from questiondraw.lottery import Lottery

store = ProjectStore("project")
store.add("Group 1")
banks = store.load_banks("Group 1")

lottery = Lottery(banks, random.Random())
lottery.step()
outcome = lottery.finish()
print(outcome.message())
store.save_banks("Group 1", banks)
```

* `questiondraw.store` – `ProjectStore` (`list_projects`, `add`, `delete`,
  `delete_all`, `reset`, `reset_all`, `load_banks`, `save_banks`),
  `QuestionBanks`, and `StoreError`, which is raised whenever a group file
  cannot be created, read, written or removed.
* `questiondraw.lottery` – `Lottery`, whose `step` picks new candidates and
  whose `finish` removes the final picks from their banks and returns a
  `DrawOutcome` with a `DrawStatus`.
* `questiondraw.selection` – `BankSelection` holds the per-question
  "taken out" marks that the edit window shows, and turns them into
  `QuestionBanks` for saving with `to_banks`.
* `questiondraw.gui` – the Tk windows and the `main` entry point.