# tests/conftest.py
"""
Pytest configuration and fixtures.
Adds src to sys.path so `import botcatalog` works without installing.
"""

import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
src_root = project_root / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from botcatalog.core.di import reset_di  # noqa: E402


@pytest.fixture(autouse=True)
def clean_registry():
    """Every test starts without bindings."""
    reset_di()
    yield
    reset_di()


@pytest.fixture
def valid_input():
    return {
        "name": "Lead Qualification Bot",
        "description": "Automated lead qualification and scoring system",
        "slug": "lead-qualification-bot",
        "niche": {
            "name": "Marketing Automation",
            "slug": "marketing-automation",
            "description": "Bots for marketing processes",
            "targetAudience": "Marketing agencies and SMBs",
            "commonUseCases": ["lead scoring", "customer segmentation"],
            "isActive": True,
        },
        "technicalSpecification": {
            "platform": "Telegram/WhatsApp",
            "technologyStack": ["Node.js", "PostgreSQL", "Redis"],
            "integrationPoints": ["CRM systems", "Email marketing", "Analytics"],
            "performanceMetrics": {
                "responseTime": 100,
                "uptime": 99.9,
                "scalability": "high",
            },
            "securityFeatures": ["SSL encryption", "Data anonymization"],
            "compliance": ["GDPR"],
            "estimatedDevelopmentTime": 40,
            "maintenanceRequirements": "Regular updates and monitoring",
        },
        "targetAudience": "Marketing managers and sales teams",
        "keyFeatures": [
            "Real-time lead scoring",
            "Multi-channel integration",
            "Custom qualification rules",
        ],
        "useCases": [
            "Qualifying inbound leads",
            "Segmenting customer base",
            "Automating follow-up sequences",
        ],
        "pricingModel": "subscription",
        "tags": ["marketing", "automation", "leads"],
    }
