from dotenvk.cli.app import app

app(prog_name="dotenvk")
