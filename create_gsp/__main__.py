from create_gsp.cli import main

main()
