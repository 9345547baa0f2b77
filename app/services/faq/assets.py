"""Front-end asset decision for a composed page."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from app.security import TokenSigner
from settings import AJAX_ACTION, ASSET_VERSION

STYLE_HANDLE = "faq-filter"
SCRIPT_HANDLE = "faq-filter"


@dataclass(frozen=True)
class Asset:
    handle: str
    src: str
    version: str = ASSET_VERSION


@dataclass(frozen=True)
class AssetPlan:
    """Styles, scripts and client config a page needs (all empty if none)."""

    styles: tuple[Asset, ...] = ()
    scripts: tuple[Asset, ...] = ()
    config: dict[str, str] = field(default_factory=dict)

    @property
    def enabled(self) -> bool:
        return bool(self.styles or self.scripts)


def plan_assets(
    rendered: Iterable[bool],
    signer: TokenSigner,
    ajax_url: str,
    asset_base: str = "/assets",
) -> AssetPlan:
    """Load assets only if at least one widget reported that it rendered."""
    if not any(rendered):
        return AssetPlan()

    return AssetPlan(
        styles=(Asset(STYLE_HANDLE, f"{asset_base}/faq-filter.css"),),
        scripts=(Asset(SCRIPT_HANDLE, f"{asset_base}/faq-filter.js"),),
        config={"ajaxUrl": ajax_url, "nonce": signer.issue(AJAX_ACTION)},
    )
