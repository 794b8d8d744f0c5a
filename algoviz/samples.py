"""Built-in algorithm snippets offered as starting points.

Only the array samples drive a simulator to completion. The tree and graph
samples whose comments mention "search" classify as linear search, but
declare no ``target``, so that simulator emits nothing; the rest fall through
to the generic path. Either way they produce declaration-only or empty
traces.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Sample:
    name: str
    title: str
    category: str
    source: str


_BUBBLE_SORT = """\
int[] arr = {64, 34, 25, 12, 22, 11, 90};
int n = arr.length;
for (int i = 0; i < n-1; i++) {
    for (int j = 0; j < n-i-1; j++) {
        if (arr[j] > arr[j+1]) {
            int temp = arr[j];
            arr[j] = arr[j+1];
            arr[j+1] = temp;
        }
    }
}"""

_LINEAR_SEARCH = """\
int[] arr = {2, 3, 4, 10, 40, 15, 25};
int target = 10;
int i = 0;
for (i = 0; i < arr.length; i++) {
    if (arr[i] == target) {
        break;
    }
}"""

_REVERSE_ARRAY = """\
int[] arr = {1, 2, 3, 4, 5, 6, 7};
int start = 0;
int end = arr.length - 1;
while (start < end) {
    int temp = arr[start];
    arr[start] = arr[end];
    arr[end] = temp;
    start++;
    end--;
}"""

_BINARY_TREE_TRAVERSAL = """\
// Binary Tree Inorder Traversal
TreeNode root = new TreeNode(50);
root.left = new TreeNode(30);
root.right = new TreeNode(70);
root.left.left = new TreeNode(20);
root.left.right = new TreeNode(40);
root.right.left = new TreeNode(60);
root.right.right = new TreeNode(80);

// Inorder: Left -> Root -> Right
void inorderTraversal(TreeNode node) {
    if (node != null) {
        inorderTraversal(node.left);
        visit(node.val);
        inorderTraversal(node.right);
    }
}"""

_BINARY_SEARCH_TREE = """\
// Binary Search Tree Operations
TreeNode root = null;
int[] values = {50, 30, 70, 20, 40, 60, 80};

for (int val : values) {
    root = insert(root, val);
}

TreeNode insert(TreeNode root, int val) {
    if (root == null) {
        return new TreeNode(val);
    }
    if (val < root.val) {
        root.left = insert(root.left, val);
    } else {
        root.right = insert(root.right, val);
    }
    return root;
}"""

_AVL_TREE = """\
// AVL Tree (Self-Balancing Binary Search Tree)
AVLNode root = null;
int[] values = {10, 20, 30, 40, 50, 25};

for (int val : values) {
    root = insert(root, val);
}

AVLNode insert(AVLNode node, int key) {
    if (node == null) {
        return new AVLNode(key);
    }

    if (key < node.key) {
        node.left = insert(node.left, key);
    } else if (key > node.key) {
        node.right = insert(node.right, key);
    } else {
        return node;
    }

    node.height = 1 + Math.max(getHeight(node.left), getHeight(node.right));

    int balance = getBalance(node);

    // Left Left Case
    if (balance > 1 && key < node.left.key) {
        return rightRotate(node);
    }

    // Right Right Case
    if (balance < -1 && key > node.right.key) {
        return leftRotate(node);
    }

    // Left Right Case
    if (balance > 1 && key > node.left.key) {
        node.left = leftRotate(node.left);
        return rightRotate(node);
    }

    // Right Left Case
    if (balance < -1 && key < node.right.key) {
        node.right = rightRotate(node.right);
        return leftRotate(node);
    }

    return node;
}"""

_GRAPH_DFS = """\
// Graph Depth-First Search
Graph graph = new Graph(7);
graph.addEdge(0, 1);
graph.addEdge(0, 2);
graph.addEdge(1, 3);
graph.addEdge(1, 4);
graph.addEdge(2, 5);
graph.addEdge(2, 6);

boolean[] visited = new boolean[7];

void dfs(int vertex) {
    visited[vertex] = true;
    visit(vertex);

    for (int neighbor : graph.getNeighbors(vertex)) {
        if (!visited[neighbor]) {
            dfs(neighbor);
        }
    }
}"""

_GRAPH_BFS = """\
// Graph Breadth-First Search
Graph graph = new Graph(6);
graph.addEdge(0, 1);
graph.addEdge(0, 2);
graph.addEdge(1, 3);
graph.addEdge(2, 4);
graph.addEdge(3, 5);
graph.addEdge(4, 5);

Queue<Integer> queue = new LinkedList<>();
boolean[] visited = new boolean[6];

void bfs(int start) {
    queue.offer(start);
    visited[start] = true;

    while (!queue.isEmpty()) {
        int vertex = queue.poll();
        visit(vertex);

        for (int neighbor : graph.getNeighbors(vertex)) {
            if (!visited[neighbor]) {
                visited[neighbor] = true;
                queue.offer(neighbor);
            }
        }
    }
}"""

_DIJKSTRA = """\
// Dijkstra's Shortest Path Algorithm
int[][] graph = {
    {0, 4, 0, 0, 0, 0, 0, 8, 0},
    {4, 0, 8, 0, 0, 0, 0, 11, 0},
    {0, 8, 0, 7, 0, 4, 0, 0, 2},
    {0, 0, 7, 0, 9, 14, 0, 0, 0},
    {0, 0, 0, 9, 0, 10, 0, 0, 0},
    {0, 0, 4, 14, 10, 0, 2, 0, 0},
    {0, 0, 0, 0, 0, 2, 0, 1, 6},
    {8, 11, 0, 0, 0, 0, 1, 0, 7},
    {0, 0, 2, 0, 0, 0, 6, 7, 0}
};

int[] dist = new int[9];
boolean[] visited = new boolean[9];

for (int i = 0; i < 9; i++) {
    dist[i] = Integer.MAX_VALUE;
}
dist[0] = 0;

for (int count = 0; count < 8; count++) {
    int u = minDistance(dist, visited);
    visited[u] = true;

    for (int v = 0; v < 9; v++) {
        if (!visited[v] && graph[u][v] != 0 &&
            dist[u] != Integer.MAX_VALUE &&
            dist[u] + graph[u][v] < dist[v]) {
            dist[v] = dist[u] + graph[u][v];
        }
    }
}"""

SAMPLES: dict[str, Sample] = {
    s.name: s
    for s in (
        Sample("bubble_sort", "Bubble Sort Algorithm", "array", _BUBBLE_SORT),
        Sample("linear_search", "Linear Search Algorithm", "array", _LINEAR_SEARCH),
        Sample("reverse_array", "Array Reversal Algorithm", "array", _REVERSE_ARRAY),
        Sample(
            "binary_tree_traversal",
            "Binary Tree Traversal",
            "tree",
            _BINARY_TREE_TRAVERSAL,
        ),
        Sample("binary_search_tree", "Binary Search Tree", "tree", _BINARY_SEARCH_TREE),
        Sample("avl_tree", "AVL Tree (Self-Balancing)", "tree", _AVL_TREE),
        Sample("graph_dfs", "Graph Depth-First Search", "graph", _GRAPH_DFS),
        Sample("graph_bfs", "Graph Breadth-First Search", "graph", _GRAPH_BFS),
        Sample("dijkstra", "Dijkstra's Shortest Path", "graph", _DIJKSTRA),
    )
}

DEFAULT_SAMPLE = "bubble_sort"


def get_sample(name: str) -> Sample:
    """Look up a built-in sample.

    Raises ``ValueError`` if *name* is not in the catalog.
    """
    sample = SAMPLES.get(name)
    if sample is None:
        raise ValueError(f"Unknown sample: {name}. Available: {list(SAMPLES)}")
    return sample
