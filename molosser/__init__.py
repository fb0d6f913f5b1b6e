"""Template-to-TSX lowering compiler."""

from .api import (  # noqa: F401
    lower_document,
    lower_template_json,
    dump_output,
    output_kind_stats,
)
