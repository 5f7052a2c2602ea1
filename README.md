# moosekernel

This is a small kernel that runs as a simulation in plain Python. It models an
80×25 VGA text terminal and translates PC keyboard scan codes (set 1, US
layout) into characters. It also keeps an in-memory file system. On top of
these runs a shell that understands the following commands:

`ls`, `pwd`, `cd`, `mkdir`, `rmdir`, `rm`, `cat`, `touch`, `hello`, `clear`, `echo`

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running it

```
moosekernel "mkdir docs" "cd docs" "touch notes" "ls"
```

The command first boots the kernel. The terminal then shows the welcome line
and the prompt. After that, each argument is typed as a line of key presses
followed by Enter. When no arguments are given, the lines come from standard
input. Once every line has run, the screen is printed with trailing spaces
removed.

Some characters have no key on the keyboard map, for example non-ASCII text or
a tab. If a line contains one, the command stops with an error message and
exit status 1.

## Using it from Python

```python
from moosekernel.kernel import Kernel

kernel = Kernel()
kernel.boot()
kernel.type_line("mkdir docs")
kernel.type_line("cd docs")
kernel.type_line("touch notes")
kernel.type_line("ls")
print(kernel.terminal.screen_text())
```

You can also use the pieces on their own:

- `moosekernel.terminal.Terminal` is the text screen. It provides:
  - `write`, `write_string`, `put_char` and `newline` for output;
  - `backspace`, which never deletes past `no_delete`;
  - `scroll` for moving the contents up;
  - `cell`, `line_text` and `screen_text` for inspecting the screen.
- `moosekernel.keyboard.translate(scancode, shift, caps)` maps a key-press scan code to a character, or returns `None`. Shift takes precedence over caps lock.
- `moosekernel.keyhandler.KeyHandler` takes scan codes through `process_key`. It does the following:
  - toggles the shift and caps lock state;
  - edits the current line, which is available as `line`;
  - on Enter, passes the line to the shell.
- `moosekernel.filesystem.FileSystem` is the in-memory tree. It has these operations:
  - `mkdir`, `mkfile`, `edit_file`, `rm` and `rmdir` for changing the tree;
  - `cat`, `listing`, `cd` and `pwd` for reading and moving around.

  When an operation fails, it raises a `FileSystemError` subclass: `InvalidNameError`, `InvalidContentError`, `LimitReachedError`, `AlreadyExistsError`, `NotFoundError` or `NotEmptyError`. Nodes come from a fixed pool and are never returned to it.
- `moosekernel.shell.Shell` is the command interpreter. It provides `prompt` and `process_command`.
- `moosekernel.vga` contains `VgaColor`, `entry_color`, `entry` and a `Framebuffer` (320×200 by default) with `putpixel`, `pixel` and `draw_rect`.
- `moosekernel.textlib` contains `truncate_name`, `format_bounded` and `split_string`. All three work within fixed size limits.

## What it does not do

- Everything is simulated in memory. The package does not drive any hardware and does not boot on a machine.
- The file system is not saved anywhere. It is lost when the process ends.
- The shell cannot give a file content. `touch` creates an empty file. Content can only be set from Python with `FileSystem.mkfile` or `FileSystem.edit_file`.
- `Kernel.boot` paints a red rectangle into the framebuffer. Nothing displays the framebuffer.