from dipswitch.tutorial import main

main()
