"""
Book of Hours Linker — turns clipboard captures from the game into Joplin notes.

Watches the clipboard while a scan is open, parses each "title / blank /
description" capture, and merges it into the note being built.  Influences
are auto-created as reference notes in a dedicated notebook, linked into the
note's influence line, and tagged onto the note.
"""
