"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides catalog documents, lookup services and settings isolation.

==============================================================================
"""

import json
from pathlib import Path
from typing import Any, Dict, Generator

import pytest

from product_lookup.catalog import CatalogIndex
from product_lookup.config import get_settings
from product_lookup.services import ProductLookupService


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Drop the cached Settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================================
# DOCUMENT FIXTURES
# ============================================================================

@pytest.fixture
def scenario_document() -> Dict[str, Any]:
    """Single firewall addon with one two-level product."""
    return {
        "attributes": {
            "controlType": "addon-configurator",
            "configGroupName": "security-addons",
            "addons": [
                {
                    "id": "firewall",
                    "tree": {
                        "id": "vendor",
                        "options": [
                            {
                                "value": "fortigate",
                                "label": "Fortigate",
                                "children": {
                                    "id": "cpu",
                                    "options": [{"value": "4-cpu", "label": "4 CPU"}],
                                },
                            }
                        ],
                    },
                }
            ],
            "products": [
                {
                    "id": "8800190627841",
                    "addonType": "firewall",
                    "matchCriteria": {"vendor": "fortigate", "cpu": "4-cpu"},
                }
            ],
        }
    }


@pytest.fixture
def catalog_document() -> Dict[str, Any]:
    """Two addons, six products, one of them referencing an unknown addon."""
    firewall_tree = {
        "id": "vendor",
        "label": "Vendor",
        "labelAr": "المورد",
        "type": "select",
        "required": True,
        "options": [
            {
                "value": "fortigate",
                "label": "Fortigate",
                "labelAr": "فورتيجيت",
                "children": {
                    "id": "cpu",
                    "label": "CPU",
                    "type": "select",
                    "required": True,
                    "options": [
                        {
                            "value": "4-cpu",
                            "label": "4 CPU",
                            "children": {
                                "id": "license",
                                "label": "License",
                                "type": "radio",
                                "options": [
                                    {"value": "byol", "label": "Bring Your Own License"},
                                    {"value": "payg", "label": "Pay As You Go"},
                                ],
                            },
                        },
                        {"value": "8-cpu", "label": "8 CPU"},
                    ],
                },
            },
            {
                "value": "paloalto",
                "label": "Palo Alto",
                "children": {
                    "id": "cpu",
                    "options": [{"value": "4-cpu", "label": "4 vCPU"}],
                },
            },
        ],
    }

    return {
        "attributes": {
            "controlType": "addon-configurator",
            "configGroupName": "security-addons",
            "addons": [
                {
                    "id": "firewall",
                    "name": "Managed Firewall",
                    "nameAr": "جدار حماية مُدار",
                    "maxInstances": 2,
                    "itemChoiceKey": "firewallChoice",
                    "pricingKey": "firewallPricing",
                    "tree": firewall_tree,
                },
                {
                    "id": "backup",
                    "name": "Backup",
                    "tree": {
                        "id": "plan",
                        "options": [
                            {"value": "daily", "label": "Daily"},
                            {"value": "weekly", "label": "Weekly"},
                        ],
                    },
                },
            ],
            "products": [
                {"id": "fw-1", "addonType": "firewall",
                 "matchCriteria": {"vendor": "fortigate", "cpu": "4-cpu", "license": "byol"}},
                {"id": "fw-2", "addonType": "firewall",
                 "matchCriteria": {"vendor": "fortigate", "cpu": "4-cpu", "license": "payg"}},
                {"id": "fw-3", "addonType": "firewall",
                 "matchCriteria": {"vendor": "fortigate", "cpu": "8-cpu"}},
                {"id": "fw-4", "addonType": "firewall",
                 "matchCriteria": {"vendor": "paloalto", "cpu": "4-cpu"}},
                {"id": "bk-1", "addonType": "backup",
                 "matchCriteria": {"plan": "daily"}},
                {"id": "orphan-1", "addonType": "antivirus",
                 "matchCriteria": {"edition": "pro"}},
            ],
        }
    }


@pytest.fixture
def catalog_file(tmp_path: Path, catalog_document: Dict[str, Any]) -> Path:
    """Catalog document written to a JSON file."""
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog_document), encoding="utf-8")
    return path


# ============================================================================
# SERVICE FIXTURES
# ============================================================================

@pytest.fixture
def index(catalog_document: Dict[str, Any]) -> CatalogIndex:
    """Index over the catalog document."""
    return CatalogIndex.build(catalog_document)


@pytest.fixture
def service(catalog_document: Dict[str, Any]) -> ProductLookupService:
    """Lookup service over the catalog document."""
    return ProductLookupService(catalog_document, duplicate_policy="overwrite")
