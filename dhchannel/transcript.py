"""
Exchange transcript.

Keeps an ordered, append-only record of every reported step of an exchange:
step | actor | action | detail

Held in memory; save() writes it out as JSON when asked to.
"""

import json
import os
from typing import List

from dhchannel.common.protocol import TranscriptEntry
from dhchannel.common.utils import sha256_hex


class Transcript:
    """
    Ordered record of an exchange.
    """

    def __init__(self):
        self.entries: List[TranscriptEntry] = []

    def append(self, step: int, actor: str, action: str, detail) -> TranscriptEntry:
        """
        Append an entry to the transcript.

        Args:
            step: Exchange step number (1-6)
            actor: Party name, or "channel" for transmissions
            action: Short label, e.g. "public_value"
            detail: Value being reported (converted with str())

        Returns:
            The new entry
        """
        entry = TranscriptEntry(step=step, actor=actor, action=action, detail=str(detail))
        self.entries.append(entry)
        return entry

    def lines(self) -> List[str]:
        return [f"{e.step}|{e.actor}|{e.action}|{e.detail}" for e in self.entries]

    def sha256_hex(self) -> str:
        """
        Compute SHA-256 hash of the entire transcript.

        Returns:
            Hex-encoded SHA-256 hash over the newline-terminated lines
        """
        return sha256_hex("".join(line + "\n" for line in self.lines()).encode('utf-8'))

    def save(self, path: str):
        """
        Save the transcript and its hash as JSON.

        Args:
            path: Output file; parent directories are created
        """
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)

        data = {
            "entries": [e.model_dump() for e in self.entries],
            "transcript_sha256": self.sha256_hex(),
        }
        with open(path, 'w') as f:
            json.dump(data, f, indent=2)

    def __len__(self):
        return len(self.entries)
