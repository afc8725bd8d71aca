from streamlog.cli import app

app(prog_name="streamlog")
