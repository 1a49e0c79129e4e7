from docs_proxy.bridge import main

main()
