"""Shared component sources and document builders for tests."""

import textwrap

from sfc_pipeline.documents import SourceDocument

BUTTON_COMPONENT = textwrap.dedent(
    """\
    <template>
      <button class="btn">{{ label }}</button>
    </template>

    <script>
      export default { props: ['label'] }
    </script>

    <style>
      .btn { color: red; }
    </style>
    """
)


def make_document(content: str, path: str | None = "src/components/Button.vue", base: str | None = None) -> SourceDocument:
    return SourceDocument(path=path, base=base, content=content)
