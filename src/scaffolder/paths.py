"""Output path resolution for generated pages.

The module-to-directory table is part of the external contract: the app
router discovers generated pages by these locations, so entries must not be
changed casually.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from src.presets.models import EntityPreset, Module
from src.utils import kebab_case

MODULE_PATH_PREFIXES: dict[str, str] = {
    Module.CRM.value: "crm/",
    Module.MCA.value: "crm/mca/",
    Module.INV.value: "inventory/",
    Module.PROCUREMENT.value: "enterprise/procurement/purchasing-rebates/",
    Module.WASTE_MANAGEMENT.value: "greenworms/waste-management/",
    Module.FINANCE.value: "finance/",
    Module.HR.value: "enterprise/hr/",
    Module.SALON.value: "enterprise/salon/",
    Module.JEWELRY.value: "jewelry/",
    Module.FURNITURE.value: "furniture/",
    Module.AUDIT.value: "audit/",
    Module.ISP.value: "isp/",
    Module.RETAIL.value: "enterprise/retail/",
    Module.ICECREAM.value: "icecream/",
}

_unmapped = sorted(m.value for m in Module if m.value not in MODULE_PATH_PREFIXES)
if _unmapped:
    raise RuntimeError(f"Modules without an output path prefix: {', '.join(_unmapped)}")


def module_prefix(module: str) -> str:
    """Directory prefix for *module*; unlisted tags use their lower-cased name."""
    prefix = MODULE_PATH_PREFIXES.get(module)
    if prefix is None:
        return f"{module.lower()}/"
    return prefix


def resolve_path(preset: EntityPreset) -> str:
    """Return the page directory for *preset*, relative to the app directory.

    Examples::

        CONTACT        -> "crm/mca/contacts"
        PURCHASE_ORDER -> "enterprise/procurement/purchasing-rebates/purchase-orders"
    """
    return f"{module_prefix(preset.module)}{kebab_case(preset.title_plural)}"


def page_path(preset: EntityPreset, app_dir: str = "src/app") -> PurePosixPath:
    """``<app_dir>/<resolved>/page.tsx``, relative to the project root."""
    return PurePosixPath(app_dir) / resolve_path(preset) / "page.tsx"


def api_route_path(preset: EntityPreset, app_dir: str = "src/app") -> PurePosixPath:
    """``<app_dir>/api/v1/<resolved>/route.ts``, relative to the project root."""
    return PurePosixPath(app_dir) / "api" / "v1" / resolve_path(preset) / "route.ts"
