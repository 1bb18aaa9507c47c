from ttyscreen.cli.main import main

main()
