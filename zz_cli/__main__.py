from zz_cli.cli import main

main()
