"""Shared fixtures: a small seed document and its parsed dataset."""

import copy
import json

import pytest

from app.models.governance import Dataset

SEED = {
    "charter": {
        "title": "Civic AI Charter",
        "purpose": "Keep public algorithms accountable.",
        "pillars": [
            {
                "id": "transparency",
                "title": "Transparency",
                "icon": "🔎",
                "color": "#8b5cf6",
                "desc": "Every public algorithm is documented.",
                "principles": ["Publish model cards.", "Log automated decisions."],
            },
            {
                "id": "participation",
                "title": "Participation",
                "icon": "🗳️",
                "color": "#10b981",
                "desc": "Residents shape the rules.",
                "principles": ["Select by lottery."],
            },
        ],
        "enforcement": "Binding through procurement conditions.",
    },
    "assemblies": [
        {
            "id": "housing",
            "name": "Housing Assembly",
            "domain": "Housing & Land Use",
            "members": 48,
            "demographics": {"age18_34": 31, "age35_54": 38, "age55plus": 31, "female": 50, "male": 46, "nonbinary": 4},
            "meetingsHeld": 14,
            "decisionsIssued": 22,
            "bindingRate": 0.6,
            "avgTurnout": 0.915,
            "stipendPerSession": 150,
            "nextSession": "2026-11-04",
        },
        {
            "id": "mobility",
            "name": "Mobility Assembly",
            "domain": "Transit & Streets",
            "members": 36,
            "demographics": {"age18_34": 40, "age35_54": 40, "age55plus": 40, "female": 50, "male": 50, "nonbinary": 0},
            "meetingsHeld": 11,
            "decisionsIssued": 18,
            "bindingRate": 0.8,
            "avgTurnout": 0.874,
            "stipendPerSession": 125.5,
            "nextSession": "Q1 2027",
        },
    ],
    "modules": [
        {
            "id": "assembly-engine",
            "title": "Assembly Engine",
            "status": "GA",
            "version": "2.3.0",
            "desc": "Sortition and scheduling for citizen assemblies.",
            "features": ["Stratified sortition", "Stipend disbursement"],
            "techStack": "Python, PostgreSQL",
            "metrics": {
                "participants_served": 1842,
                "avg_selection_time_s": 3.2,
                "uptime": "99.95%",
                "assemblies_hosted": 1000,
                "regions": 12.0,
            },
        },
        {
            "id": "audit-ledger",
            "title": "Audit Ledger",
            "status": "Beta",
            "version": "0.9.4",
            "desc": "Append-only registry of AI system audits, findings, incidents and remediation status, "
            "published as an open feed for residents.",
            "features": ["Incident reporting"],
            "techStack": "Go, SQLite",
            "metrics": {},
        },
    ],
    "auditTimeline": [
        {"year": 2026, "audited": 10, "total": 50, "incidents": 2, "resolved": 1},
        {"year": 2027, "audited": 22, "total": 55, "incidents": 1, "resolved": 1},
    ],
    "participation": {
        "totalResidents": 2500000,
        "registered": 1875000,
        "activeVoters": 982000,
        "assemblyParticipants": 84,
        "avgTurnoutRate": 0.62,
        "quadraticVotesLastQuarter": 128400,
        "demographicEquity": {
            "age_18_34": 0.88,
            "low_income": 0.79,
            "women": 0.97,
            "non_native_speakers": 0.6,
            "age_55_plus": 1.04,
        },
        "satisfactionIndex": 3.9,
        "accessibilityScore": 0.87,
    },
    "fundingStack": [
        {"label": "Municipal Budget", "value": "$4.2M", "sub": "0.1% of operating budget", "color": "#8b5cf6"},
    ],
}


@pytest.fixture
def seed() -> dict:
    return copy.deepcopy(SEED)


@pytest.fixture
def dataset(seed) -> Dataset:
    return Dataset.model_validate(seed)


@pytest.fixture
def seed_file(tmp_path, seed):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(seed), encoding="utf-8")
    return path
