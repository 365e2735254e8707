"""Quickstart Example - Splitting Text With StrSlicer.

Demonstrates the core slicer operations:

1. Split a path into directory, filename and extension
2. Handle a missing delimiter (absence, not an error)
3. Read key=value lines with line tracking
4. Catch an invalid jump

Python 3.13+.
"""

from __future__ import annotations

from strslicer import LineTracker, SlicerPositionError, as_slicer

# ============================================================================
# Example 1: Path Splitting
# ============================================================================
print("=" * 50)
print("Example 1: Path Splitting")
print("=" * 50)

slicer = as_slicer("images/cat.jpeg")
directory = slicer.slice_until("/")
slicer.skip_over("/")
filename = slicer.slice_until(".")
slicer.skip_over(".")
extension = slicer.slice_to_end()

print(f"directory: {directory}")
print(f"filename:  {filename}")
print(f"extension: {extension}")

# ============================================================================
# Example 2: Missing Delimiter
# ============================================================================
print("\n" + "=" * 50)
print("Example 2: Missing Delimiter")
print("=" * 50)

slicer = as_slicer("noextension")
stem = slicer.slice_until(".")
print(f"slice_until('.') -> {stem!r}")
print(f"slice_to_end()   -> {str(slicer.slice_to_end())!r}")

# ============================================================================
# Example 3: Key/Value Lines With Line Tracking
# ============================================================================
print("\n" + "=" * 50)
print("Example 3: Key/Value Lines")
print("=" * 50)

config = "name = slicer\r\nversion = 1\nbroken line\n"
slicer = as_slicer(config, tracker=LineTracker())
while (line := slicer.slice_line()) is not None:
    line_number = slicer.tracker_pos
    fields = as_slicer(line)
    key = fields.slice_until("=")
    if key is None:
        print(f"  line {line_number}: no '=' in {line.text!r}")
        continue
    fields.skip_over("=")
    value = fields.slice_to_end()
    print(f"  {key.text.strip()} -> {value.text.strip()}")

# ============================================================================
# Example 4: Invalid Jump
# ============================================================================
print("\n" + "=" * 50)
print("Example 4: Invalid Jump")
print("=" * 50)

slicer = as_slicer("abc")
slicer.jump_to(2)
try:
    slicer.jump_to(1)
except SlicerPositionError as e:
    print(e)

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
