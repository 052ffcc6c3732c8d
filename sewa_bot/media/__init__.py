"""
Media handling for uploads coming from Telegram.

- processor: shrink and re-encode photos before they are committed
- naming: collision-resistant names for stored images and documents
"""
