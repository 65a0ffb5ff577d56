"""
Document descriptions.

- :py:mod:`footlights.config.structure`: ordered layer slots and documents
- :py:mod:`footlights.config.style`: named styles
- :py:mod:`footlights.config.resolver`: structure and styles to canvas
"""
