"""Captured system utility output used across discovery tests."""

LSOF_OUTPUT = """\
COMMAND     PID   USER   FD   TYPE     DEVICE SIZE/OFF NODE NAME
node      12345   user    4u  IPv4 0x1234567   0t0  TCP *:3000 (LISTEN)
node      12345   user    5u  IPv6 0x7654321   0t0  TCP *:3000 (LISTEN)
chrome    54321   user   10u  IPv4 0xabcdefa   0t0  TCP localhost:3000->localhost:50123 (ESTABLISHED)
"""

LINUX_NETSTAT_OUTPUT = """\
Active Internet connections (servers and established)
Proto Recv-Q Send-Q Local Address           Foreign Address         State       PID/Program name
tcp        0      0 0.0.0.0:3000            0.0.0.0:*               LISTEN      12345/node
tcp6       0      0 :::3000                 :::*                    LISTEN      12345/node
tcp        0      0 127.0.0.1:8080          0.0.0.0:*               LISTEN      54321/chrome
tcp        0      0 0.0.0.0:22              0.0.0.0:*               LISTEN      -
tcp        0      0 10.0.0.5:3000           10.0.0.9:41234          ESTABLISHED 777/curl
udp        0      0 0.0.0.0:3000            0.0.0.0:*                           888/dnsmasq
"""

WINDOWS_NETSTAT_OUTPUT = (
    "\r\n"
    "Active Connections\r\n"
    "\r\n"
    "  Proto  Local Address          Foreign Address        State           PID\r\n"
    "  TCP    0.0.0.0:3000           0.0.0.0:0              LISTENING       4321\r\n"
    "  TCP    [::]:3000              [::]:0                 LISTENING       4321\r\n"
    "  TCP    0.0.0.0:3000           0.0.0.0:0              LISTENING       9876\r\n"
    "  TCP    127.0.0.1:8080         0.0.0.0:0              LISTENING       5555\r\n"
    "  TCP    10.0.0.5:3000          10.0.0.9:50000         ESTABLISHED     1111\r\n"
    "  UDP    0.0.0.0:3000           *:*                                    2222\r\n"
)

TASKLIST_OUTPUT = (
    "\r\n"
    "Image Name                     PID Session Name        Session#    Mem Usage\r\n"
    "========================= ======== ================ =========== ============\r\n"
    "node.exe                      4321 Console                    1     45,000 K\r\n"
)

TASKLIST_NO_MATCH_OUTPUT = "INFO: No tasks are running which match the specified criteria.\r\n"
