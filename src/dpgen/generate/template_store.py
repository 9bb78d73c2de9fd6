"""Template store: loads stub text by variant, honoring per-project overrides."""

from pathlib import Path

from dpgen.generate.template_selector import TemplateVariant


_STUBS_DIR = Path(__file__).parent / "stubs"


class TemplateStore:
    """Reads stubs from the package, or from ``<override_dir>`` when present.

    Projects customise generated code by copying a stub to the same relative
    path under their own ``stubs/`` directory.
    """

    def __init__(self, override_dir: str | None = None):
        self._override_dir = Path(override_dir) if override_dir else None

    def stub_path(self, variant: TemplateVariant) -> Path:
        if self._override_dir is not None:
            custom = self._override_dir / variant.value
            if custom.is_file():
                return custom
        return _STUBS_DIR / variant.value

    def get_template_text(self, variant: TemplateVariant) -> str:
        """Return the stub text for *variant*.

        Raises:
            FileNotFoundError: If the stub file does not exist
        """
        path = self.stub_path(variant)
        if not path.is_file():
            raise FileNotFoundError(f"Stub not found: {path}")
        return path.read_text(encoding="utf-8")
