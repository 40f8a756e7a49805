from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
import pandas as pd

from crew_qualification.domain.processed import BadgeColor, ProcessedCrewMember


BADGE_COLORS = {
    BadgeColor.GREEN.value: "#2ca02c",
    BadgeColor.YELLOW.value: "#ffbf00",
    BadgeColor.RED.value: "#d62728",
    BadgeColor.GRAY.value: "#9e9e9e",
}
BADGE_LABELS = {
    BadgeColor.GREEN.value: "Available",
    BadgeColor.YELLOW.value: "Docs missing",
    BadgeColor.RED.value: "Missing qualifications",
    BadgeColor.GRAY.value: "Inactive",
}

CREW_COLUMNS = [
    "crew_id",
    "name",
    "position",
    "role_label",
    "qualified",
    "status",
    "status_color",
    "n_missing_documents",
    "n_valid_qualifications",
    "n_expired_qualifications",
    "has_type_rating",
    "has_cabin_safety",
]


@dataclass(frozen=True)
class ReportFrames:
    crew: pd.DataFrame
    status_counts: pd.DataFrame
    missing_documents: pd.DataFrame


def build_report_frames(processed: Sequence[ProcessedCrewMember]) -> ReportFrames:
    rows = [
        {
            "crew_id": p.crew_id,
            "name": p.name,
            "position": p.position,
            "role_label": p.role_label,
            "qualified": p.qualified,
            "status": p.status_badge.text,
            "status_color": p.status_badge.color.value,
            "n_missing_documents": len(p.missing_documents),
            "n_valid_qualifications": len(p.qualifications.valid),
            "n_expired_qualifications": len(p.qualifications.expired),
            "has_type_rating": p.qualifications.has_type_rating,
            "has_cabin_safety": p.qualifications.has_cabin_safety,
        }
        for p in processed
    ]
    crew_df = pd.DataFrame(rows, columns=CREW_COLUMNS)

    # --- Position x badge colour counts ---
    colors = list(BADGE_COLORS.keys())
    if crew_df.empty:
        status_counts = pd.DataFrame(columns=colors, dtype=int)
    else:
        status_counts = (
            pd.crosstab(crew_df["position"], crew_df["status_color"])
            .reindex(columns=colors, fill_value=0)
            .astype(int)
        )
    status_counts.index.name = "position"

    # --- Missing documents (long format) ---
    doc_rows = [
        {"crew_id": p.crew_id, "position": p.position, "document": doc}
        for p in processed
        for doc in p.missing_documents
    ]
    docs_df = pd.DataFrame(doc_rows, columns=["crew_id", "position", "document"])

    return ReportFrames(crew=crew_df, status_counts=status_counts, missing_documents=docs_df)


def plot_status_by_position(frames: ReportFrames, out_dir: Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)

    counts = frames.status_counts
    positions: List[str] = [str(p) for p in counts.index]
    y = np.arange(len(positions))
    left = np.zeros(len(positions))

    fig, ax = plt.subplots(figsize=(12, 6))

    for color in BADGE_COLORS:
        values = counts[color].to_numpy() if color in counts.columns else np.zeros(len(positions))
        ax.barh(y, values, left=left, color=BADGE_COLORS[color])
        left = left + values

    ax.set_yticks(y)
    ax.set_yticklabels(positions, fontsize=11)
    ax.set_xlabel("Crew members", fontsize=12)
    ax.set_ylabel("Position", fontsize=12)
    ax.set_title("Crew Status by Position", fontsize=16, fontweight="bold")

    ax.xaxis.grid(True, linestyle="--", linewidth=0.6, alpha=0.4)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)

    legend_patches = [
        mpatches.Patch(color=BADGE_COLORS[c], label=BADGE_LABELS[c]) for c in BADGE_COLORS
    ]
    ax.legend(
        handles=legend_patches,
        fontsize=11,
        loc="upper left",
        bbox_to_anchor=(1.02, 1),
        borderaxespad=0,
    )

    plt.tight_layout()
    plt.savefig(out_dir / "status_by_position.png", dpi=200, bbox_inches="tight")
    plt.close(fig)


def plot_missing_documents(frames: ReportFrames, out_dir: Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)

    counts = frames.missing_documents["document"].value_counts()

    plt.figure(figsize=(12, 6))
    plt.bar(counts.index.astype(str), counts.values)
    plt.xlabel("Document")
    plt.ylabel("Crew count")
    plt.title("Missing documents")
    plt.xticks(rotation=30, ha="right")
    plt.tight_layout()
    plt.savefig(out_dir / "missing_documents.png", dpi=160)
    plt.close()


def save_plots(frames: ReportFrames, out_dir: Path) -> None:
    plot_status_by_position(frames, out_dir)
    plot_missing_documents(frames, out_dir)


def save_tables(frames: ReportFrames, out_dir: Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)
    frames.crew.to_csv(out_dir / "crew_status.csv", index=False)
    frames.status_counts.to_csv(out_dir / "status_counts.csv")
    frames.missing_documents.to_csv(out_dir / "missing_documents.csv", index=False)
