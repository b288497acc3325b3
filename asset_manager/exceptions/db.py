class AssetStoreError(RuntimeError):
    """Reading from or writing to the asset registry failed."""

    def __init__(self, table, owner=None):
        self.table, self.owner = table, owner
        super(AssetStoreError, self).__init__(
            f"Asset registry '{table}' unavailable (owner={owner})"
        )
