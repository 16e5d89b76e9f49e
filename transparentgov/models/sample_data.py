"""Audit records shipped with the public dashboard."""

from __future__ import annotations

from transparentgov.models.catalog import Catalog

SAMPLE_AUDITS: tuple[dict, ...] = (
    {
        "id": "welfare-dist-001",
        "name": "National Welfare Distribution AI",
        "agency": "Ministry of Social Justice",
        "status": "Bias Detected",
        "fairnessScore": 72,
        "lastAudit": "2024-07-10",
        "description": (
            "AI model to determine eligibility and allocation of national "
            "welfare benefits."
        ),
        "biasDetails": {
            "demographic": "Geographic Location",
            "disparity": "Urban vs. Rural",
            "impact": (
                "Applicants from rural areas have a 18% lower approval rate "
                "compared to urban applicants with similar profiles."
            ),
        },
        "xaiExplanation": {
            "title": "Key Factors in Decision Making",
            "factors": [
                {"name": "Income Level", "importance": 0.35},
                {"name": "Household Size", "importance": 0.25},
                {"name": "Geographic Location", "importance": 0.20},
                {"name": "Employment Status", "importance": 0.15},
                {"name": "Previous Aid", "importance": 0.05},
            ],
        },
        "blockchainTx": "0x1a2b3c4d5e6f7g8h9i0j1k2l3m4n5o6p7q8r9s0t",
        "dataSource": "National Citizen Database v3.2",
        "algorithmVersion": "WelfareNet-v1.4",
    },
    {
        "id": "loan-approval-002",
        "name": "Agri-Loan Approval System",
        "agency": "Ministry of Agriculture",
        "status": "Fair",
        "fairnessScore": 95,
        "lastAudit": "2024-06-22",
        "description": (
            "Automated system for processing and approving agricultural loans "
            "for small-scale farmers."
        ),
        "biasDetails": {
            "demographic": "N/A",
            "disparity": "N/A",
            "impact": "No significant bias detected across monitored demographics.",
        },
        "xaiExplanation": {
            "title": "Key Factors in Decision Making",
            "factors": [
                {"name": "Credit Score", "importance": 0.40},
                {"name": "Land Ownership", "importance": 0.30},
                {"name": "Crop Type", "importance": 0.15},
                {"name": "Past Yields", "importance": 0.10},
                {"name": "Loan Amount", "importance": 0.05},
            ],
        },
        "blockchainTx": "0x9s8r7q6p5o4n3m2l1k0j9i8h7g6f5e4d3c2b1a",
        "dataSource": "Farmer Registry 2023-Q4",
        "algorithmVersion": "AgriCredit-v2.1",
    },
    {
        "id": "resource-alloc-003",
        "name": "Public Resource Allocation",
        "agency": "Urban Development Authority",
        "status": "Bias Detected",
        "fairnessScore": 81,
        "lastAudit": "2024-07-01",
        "description": (
            "Model for allocating public resources like sanitation services "
            "and infrastructure projects."
        ),
        "biasDetails": {
            "demographic": "Socio-economic Status",
            "disparity": "Low-income vs. High-income Neighborhoods",
            "impact": (
                "High-income neighborhoods are prioritized for infrastructure "
                "upgrades 12% more often than low-income areas."
            ),
        },
        "xaiExplanation": {
            "title": "Key Factors in Decision Making",
            "factors": [
                {"name": "Population Density", "importance": 0.30},
                {"name": "Existing Infrastructure", "importance": 0.28},
                {"name": "Tax Revenue", "importance": 0.22},
                {"name": "Citizen Petitions", "importance": 0.15},
                {"name": "Political Zoning", "importance": 0.05},
            ],
        },
        "blockchainTx": "0xabc123def456ghi789jkl0mno1pqr2stu3vwx",
        "dataSource": "Municipal Records 2023",
        "algorithmVersion": "UrbanPlan-v3.0",
    },
)


def sample_catalog() -> Catalog:
    return Catalog.from_dicts(SAMPLE_AUDITS)
