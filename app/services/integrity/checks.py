"""Dataset integrity checks - report only, never modify data."""

from collections import Counter

from app.models.governance import Dataset

DEMOGRAPHIC_TOLERANCE = 1.0


def _duplicates(ids: list[str]) -> list[str]:
    return sorted(i for i, n in Counter(ids).items() if n > 1)


def validate_dataset(dataset: Dataset) -> dict:
    """Validate invariants of a loaded dataset."""
    issues = []
    warnings = []

    stats = {
        "pillars": len(dataset.charter.pillars),
        "assemblies": len(dataset.assemblies),
        "modules": len(dataset.modules),
        "audit_years": len(dataset.audit_timeline),
        "funding_items": len(dataset.funding_stack),
    }

    collections = {
        "pillar": [p.id for p in dataset.charter.pillars],
        "assembly": [a.id for a in dataset.assemblies],
        "module": [m.id for m in dataset.modules],
    }
    for name, ids in collections.items():
        dupes = _duplicates(ids)
        if dupes:
            issues.append(f"Duplicate {name} ids: {', '.join(dupes)}")

    years = [a.year for a in dataset.audit_timeline]
    if not years:
        warnings.append("Audit timeline is empty; latest-year figures will show N/A")
    elif years != sorted(years):
        issues.append("Audit timeline is not ordered by year")

    for a in dataset.assemblies:
        for field in ("binding_rate", "avg_turnout"):
            value = getattr(a, field)
            if not 0 <= value <= 1:
                issues.append(f"{a.id}: {field}={value} outside [0, 1]")

        d = a.demographics
        groups = {
            "age": d.age_18_34 + d.age_35_54 + d.age_55_plus,
            "gender": d.female + d.male + d.nonbinary,
        }
        for group, total in groups.items():
            if abs(total - 100) > DEMOGRAPHIC_TOLERANCE:
                warnings.append(f"{a.id}: {group} demographics sum to {total:g}%")

    p = dataset.participation
    for field in ("avg_turnout_rate", "accessibility_score"):
        value = getattr(p, field)
        if not 0 <= value <= 1:
            issues.append(f"participation: {field}={value} outside [0, 1]")
    if not 0 <= p.satisfaction_index <= 5:
        issues.append(f"participation: satisfaction_index={p.satisfaction_index} outside [0, 5]")

    return {
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
        "warnings": warnings,
    }
