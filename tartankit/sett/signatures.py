"""
Sett signatures for comparison and deduplication.

Three canonical forms are produced per sett:

  exact        "B24-W4-B24"   color and count per stripe
  structural   "A24-B4-A24"   colors replaced by letters in first-seen order,
                              so recolorings of one pattern compare equal
  proportional "0.46:0.08:0.46"  each stripe's share of the total, rounded
                              half-up to 2 decimals

Pivot flags and symmetry are not part of any signature.
"""

from __future__ import annotations

from tartankit.utilities.rounding import round_half_up

from .types import Sett, SettSignature, SignatureComparison


def _format_ratio(hundredths: int) -> str:
    # Shortest decimal form: 50 -> "0.5", 100 -> "1", 7 -> "0.07"
    return f"{hundredths / 100:g}"


def generate_signatures(sett: Sett) -> SettSignature:
    exact = "-".join(f"{s.color}{s.count}" for s in sett.stripes)

    letters: dict[str, str] = {}
    structural_parts: list[str] = []
    for stripe in sett.stripes:
        if stripe.color not in letters:
            letters[stripe.color] = chr(ord("A") + len(letters))
        structural_parts.append(f"{letters[stripe.color]}{stripe.count}")

    total = sett.total_threads
    proportional = ":".join(
        _format_ratio(round_half_up(s.count / total * 100)) for s in sett.stripes
    )

    return SettSignature(
        signature=exact,
        structure_signature="-".join(structural_parts),
        proportion_signature=proportional,
    )


def compare_signatures(sig1: SettSignature, sig2: SettSignature) -> SignatureComparison:
    return SignatureComparison(
        exact=sig1.signature == sig2.signature,
        structural=sig1.structure_signature == sig2.structure_signature,
        proportional=sig1.proportion_signature == sig2.proportion_signature,
    )
