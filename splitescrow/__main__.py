from splitescrow.cli import main

main()
