#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
VDA5050消息语义检查
解码只保证结构正确，这里检查订单图结构和动作ID等跨字段约束。
适用于v1_1和v2_0两个版本的消息对象，返回违规描述列表，空列表表示通过
"""

from typing import Any, Iterable, List


def order_violations(order: Any) -> List[str]:
    """检查订单消息

    - 节点和边各自按sequenceId升序排列
    - 按sequenceId合并后节点和边交替出现，以节点开始和结束，sequenceId严格递增
    - 边的起止节点存在于订单中，且就是与该边相邻的节点
    - 整个订单内actionId唯一，每个动作内参数键唯一
    - 已发布(released)的元素构成路径前缀（base在horizon之前）
    """
    violations = []
    nodes = list(order.nodes)
    edges = list(order.edges)

    if not nodes:
        violations.append("订单至少需要包含一个节点")

    violations.extend(_ascending_violations(nodes, "nodes", "node_id"))
    violations.extend(_ascending_violations(edges, "edges", "edge_id"))

    # 合并后的路径，同一sequenceId时节点排在前面
    path = sorted(
        [(node.sequence_id, 0, node) for node in nodes] +
        [(edge.sequence_id, 1, edge) for edge in edges],
        key=lambda item: (item[0], item[1])
    )

    for index, (sequence_id, kind, element) in enumerate(path):
        expected_kind = index % 2
        if kind != expected_kind:
            expected = "节点" if expected_kind == 0 else "边"
            violations.append(f"sequenceId {sequence_id} 处应为{expected}，节点和边必须交替出现")
        if index > 0 and sequence_id <= path[index - 1][0]:
            violations.append(f"sequenceId {sequence_id} 不是严格递增的")
    if path and path[-1][1] != 0:
        violations.append("订单必须以节点结束")

    node_ids = {node.node_id for node in nodes}
    for index, (_, kind, edge) in enumerate(path):
        if kind != 1:
            continue
        for attr, label in (("start_node_id", "startNodeId"), ("end_node_id", "endNodeId")):
            node_id = getattr(edge, attr)
            if node_id not in node_ids:
                violations.append(f"边 {edge.edge_id} 的{label} {node_id} 不在订单节点中")
        previous_node = path[index - 1][2] if index > 0 and path[index - 1][1] == 0 else None
        next_node = path[index + 1][2] if index + 1 < len(path) and path[index + 1][1] == 0 else None
        if previous_node is not None and edge.start_node_id != previous_node.node_id:
            violations.append(f"边 {edge.edge_id} 的startNodeId应为相邻节点 {previous_node.node_id}")
        if next_node is not None and edge.end_node_id != next_node.node_id:
            violations.append(f"边 {edge.edge_id} 的endNodeId应为相邻节点 {next_node.node_id}")

    horizon_started = False
    for sequence_id, _, element in path:
        if not element.released:
            horizon_started = True
        elif horizon_started:
            violations.append(f"sequenceId {sequence_id} 已发布，但位于未发布元素之后")

    actions = [action for element in nodes + edges for action in element.actions]
    violations.extend(_action_violations(actions))
    return violations


def instant_actions_violations(message: Any) -> List[str]:
    """检查即时动作消息：actionId唯一，每个动作内参数键唯一"""
    return _action_violations(message.instant_actions)


def _ascending_violations(elements: List[Any], field_name: str, id_attr: str) -> List[str]:
    violations = []
    for previous, current in zip(elements, elements[1:]):
        if current.sequence_id <= previous.sequence_id:
            violations.append(
                f"{field_name}未按sequenceId升序排列: "
                f"{getattr(previous, id_attr)}({previous.sequence_id}) 之后是 "
                f"{getattr(current, id_attr)}({current.sequence_id})"
            )
    return violations


def _action_violations(actions: Iterable[Any]) -> List[str]:
    violations = []
    seen_ids = set()
    for action in actions:
        if action.action_id in seen_ids:
            violations.append(f"actionId {action.action_id} 重复")
        seen_ids.add(action.action_id)

        seen_keys = set()
        for parameter in action.action_parameters:
            if parameter.key in seen_keys:
                violations.append(f"动作 {action.action_id} 的参数键 {parameter.key} 重复")
            seen_keys.add(parameter.key)
    return violations
