"""Generation of the rust-project.json file for rust-analyzer."""

from __future__ import annotations

import dataclasses
import json
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One crate entry of rust-project.json."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    """The contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def path_to_json(self, path: str) -> None:
        """Add a crate when the text after the first dot of path is 'rs'."""
        _, dot, ext = path.partition(".")
        if dot and ext == "rs":
            self.crates.append(Crate(root_module=path))

    def exercises_to_json(self, root: str | os.PathLike = "exercises") -> None:
        """Add a crate for every .rs file found below root."""
        for entry in sorted(Path(root).glob("**/*")):
            self.path_to_json(str(entry))

    def get_sysroot_src(self) -> None:
        """Ask rustc for the default toolchain and point at its std sources."""
        result = subprocess.run(
            ["rustc", "--print", "sysroot"], capture_output=True, check=False
        )
        output = (result.stdout or b"").decode("utf-8", errors="replace")
        words = output.split()
        toolchain = words[0] if words else output
        print(f"Determined toolchain: {toolchain}\n")
        self.sysroot_src = str(
            Path(toolchain) / "lib" / "rustlib" / "src" / "rust" / "library"
        )

    def to_json(self) -> str:
        """Serialise the project compactly."""
        return json.dumps(
            dataclasses.asdict(self), separators=(",", ":"), ensure_ascii=False
        )

    def write_to_disk(self, path: str | os.PathLike = "./rust-project.json") -> None:
        """Write the project file."""
        Path(path).write_bytes(self.to_json().encode("utf-8"))