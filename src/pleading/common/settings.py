class Settings:
    verbose: bool
    dialect: str | None
    tally: bool
    ascii: bool
    max_steps: int | None

    def __init__(self):
        self.verbose = False
        self.dialect = None
        self.tally = False
        self.ascii = False
        self.max_steps = None

    def update(
        self,
        verbose: bool | None = None,
        dialect: str | None = None,
        tally: bool | None = None,
        ascii: bool | None = None,
        max_steps: int | None = None
    ):
        if verbose is not None:
            self.verbose = verbose

        if dialect is not None:
            self.dialect = dialect

        if tally is not None:
            self.tally = tally

        if ascii is not None:
            self.ascii = ascii

        if max_steps is not None:
            self.max_steps = max_steps

        return self
